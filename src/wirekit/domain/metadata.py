"""Explicit metadata map populated by decorators at class-definition time."""

import threading
from typing import Any, Dict
from weakref import WeakKeyDictionary

INJECTABLE = "wirekit:injectable"
KIND = "wirekit:kind"
CONTROLLER_PREFIX = "wirekit:controller:prefix"
SOCKET = "wirekit:socket"
SOCKET_NAMESPACE = "wirekit:socket:namespace"
SOCKET_DESCRIPTION = "wirekit:socket:description"
CLASS_GUARDS = "wirekit:guards:class"
METHOD_GUARDS = "wirekit:guards:method"


class MetadataStore:
    """Stores metadata values per target object and key.

    Targets are classes or functions. They are referenced weakly, so metadata of
    classes dropped by a module reload disappears with them.

    Attributes:
        _entries: Weak mapping from target to its key/value metadata.
    """

    def __init__(self) -> None:
        self._entries: "WeakKeyDictionary[Any, Dict[str, Any]]" = WeakKeyDictionary()
        self._lock = threading.Lock()

    def define(self, key: str, value: Any, target: Any) -> None:
        """Set a metadata value on a target.

        Args:
            key: Metadata key.
            value: Value to store.
            target: Class or function the metadata belongs to.
        """
        with self._lock:
            self._entries.setdefault(target, {})[key] = value

    def get(self, key: str, target: Any, default: Any = None) -> Any:
        """Get a metadata value, or ``default`` when the target has none for that key."""
        entry = self._entries.get(target)
        if entry is None:
            return default
        return entry.get(key, default)

    def has(self, key: str, target: Any) -> bool:
        entry = self._entries.get(target)
        return entry is not None and key in entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


metadata_store = MetadataStore()
