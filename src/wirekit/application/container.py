import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar

from wirekit.application.lifetime_manager import LifetimeManager
from wirekit.application.resolver import DependencyResolver
from wirekit.domain import (
    ContainerEntry,
    DuplicateRegistrationError,
    IContainer,
    ILifetimeManager,
    IResolver,
    Registration,
    RuntimeCircularResolutionError,
    UnregisteredDependencyError,
)

T = TypeVar("T")


class DIContainer(IContainer):
    """Main dependency injection container.

    Holds one entry per registered type. Every entry is a singleton: it is built on
    first resolution, with its constructor dependencies resolved recursively, and the
    same instance is returned afterwards. Each thread keeps the trail of entries it
    is constructing; asking for an entry already on the trail is a circular
    resolution.

    Attributes:
        _registry: Dictionary mapping dependency types to their entries.
        _resolver: Component responsible for auto-wiring constructors.
        _lifetime_manager: Component caching singleton instances.
        _local: Thread-local storage holding the resolution trail.
    """

    def __init__(self) -> None:
        """Initialize the DI container with empty registry and components."""
        self._registry: Dict[Type, ContainerEntry] = {}
        self._resolver: IResolver = DependencyResolver()
        self._lifetime_manager: ILifetimeManager = LifetimeManager()
        self._local = threading.local()

    def register(self, dependency_type: Type, builder: Optional[Callable[[IContainer], Any]] = None) -> None:
        """Register a singleton dependency.

        Args:
            dependency_type: The type to register.
            builder: Optional factory receiving the container. Without one, the type
                is constructed from its annotated constructor parameters.

        Raises:
            DuplicateRegistrationError: If the type is already registered.

        Example:
            >>> container.register(DatabaseConfig, lambda c: DatabaseConfig.from_env())
            >>> container.register(UserRepository)
        """
        if dependency_type in self._registry:
            raise DuplicateRegistrationError(dependency_type)

        registration = Registration(dependency_type=dependency_type, builder=builder)
        self._registry[dependency_type] = ContainerEntry(registration=registration)

    def register_singletons(self, dependencies: Dict[Type, Optional[Callable[[IContainer], Any]]]) -> None:
        """Register multiple singleton dependencies at once.

        Args:
            dependencies: Dictionary mapping dependency types to builder functions,
                or to None for auto-wiring.

        Raises:
            DuplicateRegistrationError: If a type is already registered.

        Example:
            >>> container.register_singletons({
            ...     DatabaseConfig: lambda c: DatabaseConfig.from_env(),
            ...     DatabaseConnection: None,
            ... })
        """
        for dependency_type, builder in dependencies.items():
            self.register(dependency_type, builder)

    def is_registered(self, dependency_type: Type) -> bool:
        return dependency_type in self._registry

    def resolve(self, dependency_type: Type[T]) -> T:
        """Resolve and return the singleton instance of the specified type.

        Args:
            dependency_type: The type to resolve.

        Returns:
            Instance of the requested type with all dependencies injected.

        Raises:
            UnregisteredDependencyError: If the type, or one of its dependencies, was never registered.
            RuntimeCircularResolutionError: If the type is requested again while being constructed.
            UnresolvableError: If the instance cannot be constructed.

        Example:
            >>> user_service = container.resolve(UserService)
        """
        entry = self._registry.get(dependency_type)
        if entry is None:
            raise UnregisteredDependencyError(dependency_type)

        with self._resolution_trail(entry):
            instance = self._lifetime_manager.get_or_create(entry, lambda: self._build(entry))
        entry.resolution_count += 1
        return instance

    def _trail(self) -> List[ContainerEntry]:
        if not hasattr(self._local, "trail"):
            self._local.trail = []
        return self._local.trail

    @contextmanager
    def _resolution_trail(self, entry: ContainerEntry) -> Iterator[None]:
        trail = self._trail()
        for index, pending in enumerate(trail):
            if pending is entry:
                names = [item.registration.dependency_type.__name__ for item in trail[index:]]
                raise RuntimeCircularResolutionError(names + [names[0]])
        trail.append(entry)
        try:
            yield
        finally:
            trail.pop()

    def _build(self, entry: ContainerEntry) -> Any:
        registration = entry.registration
        if registration.builder is not None:
            return registration.builder(self)
        return self._resolver.resolve_dependencies(registration.dependency_type, self)

    def get_registry_copy(self) -> Dict[Type, ContainerEntry]:
        """Get a copy of the registry, with fresh unresolved entries.

        Returns:
            Copy of the current registrations.
        """
        return {
            dependency_type: ContainerEntry(registration=entry.registration)
            for dependency_type, entry in self._registry.items()
        }

    def clear(self) -> None:
        """Clear all registrations and cached instances.

        Useful for testing or resetting the container state.
        """
        self._lifetime_manager.clear_cache(self._registry)
        self._registry.clear()
        self._local = threading.local()
