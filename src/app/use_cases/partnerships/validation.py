"""Input checks shared by the template use cases"""

from typing import Dict, Mapping

from libs.result import Result, Return
from src.app.errors import validation_error
from src.domain.categories import CategoryCatalog
from src.domain.entities import NO_PARTNERSHIP


def is_unbind_name(name) -> bool:
    return name is None or name.strip().casefold() in ("", NO_PARTNERSHIP.casefold())


def validate_template_name(name: str) -> Result[str]:
    cleaned = (name or "").strip()
    if not cleaned or cleaned.casefold() == NO_PARTNERSHIP.casefold():
        return Return.err(
            validation_error(
                "INVALID_TEMPLATE_NAME",
                "name",
                f"name must be non-empty and cannot be '{NO_PARTNERSHIP}'",
            )
        )
    return Return.ok(cleaned)


def validate_slots(categories: CategoryCatalog, slots: Mapping[str, int]) -> Result[Dict[str, int]]:
    """Canonical per-category slots; every category present, missing ones 0"""
    normalized = categories.zeros()
    for raw_category, amount in (slots or {}).items():
        category = categories.resolve(raw_category)
        if category is None:
            return Return.err(
                validation_error(
                    "INVALID_CATEGORY",
                    "slots_per_category",
                    f"Invalid category: {raw_category}. Must be one of: {', '.join(categories)}",
                )
            )
        if isinstance(amount, bool) or not isinstance(amount, int):
            return Return.err(
                validation_error(
                    "NEGATIVE_TOTAL",
                    "slots_per_category",
                    f"slots_per_category.{category} must be a non-negative integer",
                )
            )
        if amount < 0:
            return Return.err(
                validation_error(
                    "NEGATIVE_TOTAL",
                    "slots_per_category",
                    f"slots_per_category.{category} cannot be negative",
                )
            )
        normalized[category] = amount
    return Return.ok(normalized)
