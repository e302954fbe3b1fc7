from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, Union

from wirekit.domain.models import ContainerEntry, ScanResult

T = TypeVar("T")


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def register(self, dependency_type: Type, builder: Optional[Callable[["IContainer"], Any]] = None) -> None:
        """Register a singleton dependency.

        Args:
            dependency_type: The type to register.
            builder: Optional factory receiving the container. Defaults to auto-wiring.
        """

    @abstractmethod
    def resolve(self, dependency_type: Type[T]) -> T:
        """Resolve and return the singleton instance of the requested class type.

        Args:
            dependency_type: The type to resolve.
        """

    @abstractmethod
    def is_registered(self, dependency_type: Type) -> bool:
        """Check whether a type has been registered."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all registrations and instances from the container."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[Type, ContainerEntry]:
        """Get a copy of the current registry of dependencies."""


class IResolver(ABC):
    """Abstract interface for dependency resolution operations."""

    @abstractmethod
    def resolve_dependencies(
        self,
        dependency_type: Type,
        container: IContainer,
    ) -> Any:
        """Resolve all constructor dependencies and create instance.

        Args:
            dependency_type: The type to resolve.
            container: The DI container to use for resolving dependencies.

        Returns:
            Instance with all dependencies injected.

        Raises:
            UnresolvableError: If a constructor parameter cannot be injected.
        """


class ILifetimeManager(ABC):
    """Abstract interface for managing singleton instances."""

    @abstractmethod
    def get_or_create(
        self,
        entry: ContainerEntry,
        factory: Callable[[], Any],
    ) -> Any:
        """Get the cached instance or create it exactly once.

        Args:
            entry: The container entry owning the instance.
            factory: A callable to create a new instance if needed.
        """

    @abstractmethod
    def clear_cache(self, entries: Dict[Type, ContainerEntry]) -> None:
        """Drop cached instances, returning the entries to the registered state."""


class ISourceScanner(ABC):
    """Abstract interface for discovering injectable classes."""

    @abstractmethod
    def scan(self) -> ScanResult:
        """Scan the source tree and return the discovered classes."""


class IArtifactWriter(ABC):
    """Abstract interface for persisting the generated registration module."""

    @abstractmethod
    def read(self, path: Path) -> Optional[str]:
        """Return the current artifact text, or None when it does not exist."""

    @abstractmethod
    def write(self, path: Path, content: str) -> None:
        """Replace the artifact at ``path`` with ``content``."""


class CanActivate(ABC):
    """Contract implemented by guard classes."""

    @abstractmethod
    def can_activate(self, request: Any) -> Union[bool, Awaitable[bool]]:
        """Return whether the request may reach the guarded handler."""
