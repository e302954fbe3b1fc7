from typing import Callable, Type, TypeVar

from fastapi import FastAPI, Request

from wirekit.domain import IContainer

T = TypeVar("T")

APP_STATE_KEY = "di_container"


def create_fastapi_dependency(container: IContainer, dependency_type: Type[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable that resolves from the DI container.

    The resolved instance is the container's singleton for that type.

    Args:
        container: The DI container to resolve dependencies from.
        dependency_type: The type to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> get_user_service = create_fastapi_dependency(container, UserService)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(service: UserService = Depends(get_user_service)):
        ...     return service.get_all()
    """

    def dependency() -> T:
        """Resolve the dependency from the container."""
        return container.resolve(dependency_type)

    return dependency


def attach_container(app: FastAPI, container: IContainer) -> None:
    """Store the container on the application state for ``create_app_dependency``."""
    setattr(app.state, APP_STATE_KEY, container)


def create_app_dependency(dependency_type: Type[T]) -> Callable[[Request], T]:
    """Create a FastAPI dependency resolving from the container attached to the app.

    Requires ``attach_container`` to have been called on the application.

    Args:
        dependency_type: The type to resolve.

    Returns:
        A callable resolving from ``request.app.state.di_container``.

    Example:
        >>> attach_container(app, container)
        >>> get_user_service = create_app_dependency(UserService)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(service: UserService = Depends(get_user_service)):
        ...     return service.get_all()
    """

    def app_dependency(request: Request) -> T:
        """Resolve from the application's container."""
        container = getattr(request.app.state, APP_STATE_KEY, None)
        if container is None:
            raise RuntimeError("Application has no DI container. Did you forget to call attach_container()?")
        return container.resolve(dependency_type)

    return app_dependency
