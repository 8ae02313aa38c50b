import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Accounts, templates and slot requests shared by the integration tests"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def entry(cls, section: str, key: str) -> Dict[str, Any]:
        """Deep copy of one fixture, so tests may mutate the payload"""
        try:
            return copy.deepcopy(cls.load()[section][key])
        except KeyError:
            raise KeyError(f"No {section!r} fixture named {key!r} in test_data.json") from None
