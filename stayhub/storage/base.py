"""
Persisted key/value storage interface.

Holds the session token, the serialized user and the local wishlist
between process runs, the way a browser keeps them in local storage.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class KeyValueStorage(ABC):
    """Abstract string key/value store"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent"""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value"""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored"""

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys"""

    def clear(self) -> None:
        for key in self.keys():
            self.remove_item(key)

    # JSON helpers

    def get_json(self, key: str, default: Any = None) -> Any:
        """
        Read and parse a JSON value.

        Raises:
            json.JSONDecodeError: When the stored value is not valid JSON
        """
        raw = self.get_item(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set_json(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value, default=str))
