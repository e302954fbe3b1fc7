import threading
from typing import Any, Callable, Dict, Type

from wirekit.domain import ContainerEntry, DIException, EntryState, ILifetimeManager, UnresolvableError


class LifetimeManager(ILifetimeManager):
    """Manages singleton instances: construct once, cache forever.

    First-time construction runs under a re-entrant lock, so a construction that
    resolves its own dependencies on the same thread proceeds, while other threads
    asking for an unresolved entry wait and then observe the cached instance.

    Attributes:
        _lock: Serialises first-time constructions.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def get_or_create(self, entry: ContainerEntry, factory: Callable[[], Any]) -> Any:
        """Get the cached singleton or create and cache it.

        Args:
            entry: Container entry owning the instance.
            factory: Function to create the instance.

        Returns:
            The singleton instance of the entry.

        Raises:
            UnresolvableError: If the factory fails with a non-DI error.
        """
        if entry.state is EntryState.RESOLVED:
            return entry.cached_instance

        with self._lock:
            if entry.state is EntryState.RESOLVED:
                return entry.cached_instance

            dependency_type = entry.registration.dependency_type
            try:
                instance = factory()
            except DIException:
                raise
            except Exception as e:
                raise UnresolvableError(dependency_type, f"Failed to create instance: {str(e)}") from e

            entry.cached_instance = instance
            entry.state = EntryState.RESOLVED
            return instance

    def clear_cache(self, entries: Dict[Type, ContainerEntry]) -> None:
        """Drop all cached instances.

        Useful for testing or resetting container state.
        """
        with self._lock:
            for entry in entries.values():
                entry.cached_instance = None
                entry.state = EntryState.REGISTERED
