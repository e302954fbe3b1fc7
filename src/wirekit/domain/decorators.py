"""Class and method decorators declaring DI metadata."""

import inspect
from typing import Any, Callable, Optional, Type, TypeVar

from wirekit.domain import metadata
from wirekit.domain.enums import ClassKind
from wirekit.domain.metadata import MetadataStore, metadata_store

T = TypeVar("T")


def _mark(cls: Type, kind: ClassKind, store: MetadataStore) -> None:
    store.define(metadata.INJECTABLE, True, cls)
    store.define(metadata.KIND, kind, cls)


def injectable(store: MetadataStore = metadata_store) -> Callable[[Type[T]], Type[T]]:
    """Mark a class as an injectable service.

    Example:
        >>> @injectable()
        ... class UserService:
        ...     def __init__(self, repository: UserRepository):
        ...         self.repository = repository
    """

    def decorator(cls: Type[T]) -> Type[T]:
        _mark(cls, ClassKind.INJECTABLE, store)
        return cls

    return decorator


def controller(prefix: str = "/", store: MetadataStore = metadata_store) -> Callable[[Type[T]], Type[T]]:
    """Mark a class as an HTTP controller mounted under ``prefix``.

    Controllers are injectable, so they are registered with the container.
    """

    def decorator(cls: Type[T]) -> Type[T]:
        _mark(cls, ClassKind.CONTROLLER, store)
        store.define(metadata.CONTROLLER_PREFIX, prefix, cls)
        return cls

    return decorator


def guard(store: MetadataStore = metadata_store) -> Callable[[Type[T]], Type[T]]:
    """Mark a class as an injectable guard."""

    def decorator(cls: Type[T]) -> Type[T]:
        _mark(cls, ClassKind.GUARD, store)
        return cls

    return decorator


def socket(
    namespace: str = "/",
    description: Optional[str] = None,
    store: MetadataStore = metadata_store,
) -> Callable[[Type[T]], Type[T]]:
    """Mark a class as a socket controller listening on ``namespace``."""

    def decorator(cls: Type[T]) -> Type[T]:
        store.define(metadata.SOCKET, True, cls)
        store.define(metadata.KIND, ClassKind.SOCKET_CONTROLLER, cls)
        store.define(metadata.SOCKET_NAMESPACE, namespace, cls)
        if description:
            store.define(metadata.SOCKET_DESCRIPTION, description, cls)
        return cls

    return decorator


def use_guards(*guards: Type, store: MetadataStore = metadata_store) -> Callable[[Any], Any]:
    """Attach guard classes to a class or to a single method.

    Applied to a class the guards protect every handler; applied to a function they
    protect that handler only. Stacked decorators accumulate.

    Example:
        >>> @controller("/admin")
        ... @use_guards(AuthGuard)
        ... class AdminController:
        ...     @use_guards(RoleGuard)
        ...     def delete_user(self, request): ...
    """

    def decorator(target: Any) -> Any:
        key = metadata.CLASS_GUARDS if inspect.isclass(target) else metadata.METHOD_GUARDS
        existing = store.get(key, target, [])
        store.define(key, [*existing, *guards], target)
        return target

    return decorator
