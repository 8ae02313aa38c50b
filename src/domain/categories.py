"""
Attendee categories that capacity is tracked per.

The set is configuration (ATTENDEE_CATEGORIES), not user-extensible.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

DEFAULT_CATEGORIES: Tuple[str, ...] = ("VIP", "Partner", "Exhibitor", "Media")


class CategoryCatalog:
    """Fixed, ordered set of attendee categories"""

    def __init__(self, categories: Iterable[str] = DEFAULT_CATEGORIES):
        self._categories = tuple(dict.fromkeys(str(c).strip() for c in categories))
        if not self._categories:
            raise ValueError("At least one attendee category is required")
        self._by_folded = {c.casefold(): c for c in self._categories}

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category) -> bool:
        return self.resolve(category) is not None

    def resolve(self, category) -> Optional[str]:
        """Canonical spelling of a category, or None if unknown"""
        if not isinstance(category, str):
            return None
        return self._by_folded.get(category.strip().casefold())

    def zeros(self) -> Dict[str, int]:
        return {c: 0 for c in self._categories}
