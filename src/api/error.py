from fastapi import status
from libs.result import Error

from src.app.errors import ErrorKind, kind_of

_KIND_STATUS = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.storage: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the HTTP error matching the error's kind; unknown codes are server errors"""
    kind = kind_of(error)
    if kind is None:
        raise ServerError(error)
    raise ClientError(error, status_code=_KIND_STATUS[kind])
