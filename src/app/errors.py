"""
Application Error Taxonomy

Use cases report expected failures as ``libs.result.Error`` values. Every
error code belongs to exactly one ErrorKind so callers can tell a correctable
input (validation, conflict) from a "try again" failure (storage).
"""

from enum import Enum
from typing import Optional

from libs.result import Error


class ErrorKind(str, Enum):
    validation = "validation"
    not_found = "not_found"
    conflict = "conflict"
    forbidden = "forbidden"
    storage = "storage"


class StorageError(Exception):
    """Unexpected persistence failure; the enclosing transaction is rolled back"""

    code = "STORAGE_ERROR"

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
        self.message = message


ERROR_KINDS = {
    # Validation
    "EMPTY_REASON": ErrorKind.validation,
    "EMPTY_SLOT_REQUEST": ErrorKind.validation,
    "APPROVED_EXCEEDS_REQUESTED": ErrorKind.validation,
    "NOTHING_APPROVED": ErrorKind.validation,
    "NEGATIVE_TOTAL": ErrorKind.validation,
    "NEGATIVE_AMOUNT": ErrorKind.validation,
    "INVALID_CATEGORY": ErrorKind.validation,
    "INVALID_ROLE": ErrorKind.validation,
    "INVALID_MODULE": ErrorKind.validation,
    "INVALID_TEMPLATE_NAME": ErrorKind.validation,
    "SLOT_DETAILS_MISMATCH": ErrorKind.validation,
    "UNLIMITED_ROLE": ErrorKind.validation,
    "INVALID_ACCOUNT_ID": ErrorKind.validation,
    "EMPTY_OVERRIDE": ErrorKind.validation,
    "INVALID_AWARD_TYPE": ErrorKind.validation,
    "TOO_MANY_SLOTS": ErrorKind.validation,
    # Not found
    "ACCOUNT_NOT_FOUND": ErrorKind.not_found,
    "TEMPLATE_NOT_FOUND": ErrorKind.not_found,
    "SLOT_REQUEST_NOT_FOUND": ErrorKind.not_found,
    # Conflict
    "REQUEST_ALREADY_DECIDED": ErrorKind.conflict,
    "TEMPLATE_ALREADY_EXISTS": ErrorKind.conflict,
    "SETTING_VERSION_CONFLICT": ErrorKind.conflict,
    "CANNOT_DEMOTE_SELF": ErrorKind.conflict,
    # Forbidden
    "INSUFFICIENT_ROLE": ErrorKind.forbidden,
    "MODULE_DISABLED": ErrorKind.forbidden,
    "OVER_CAPACITY": ErrorKind.forbidden,
    "ACCOUNT_INACTIVE": ErrorKind.forbidden,
    # Storage
    StorageError.code: ErrorKind.storage,
}


def kind_of(error: Error) -> Optional[ErrorKind]:
    return ERROR_KINDS.get(error.code)


def validation_error(code: str, field: str, message: str) -> Error:
    """Validation error; ``reason`` carries the offending field name"""
    return Error(code, message, reason=field)


def not_found(code: str, what: str, identifier) -> Error:
    return Error(code, f"{what} not found: {identifier}")
