import inspect
from typing import Any, Type

from wirekit.application.introspection import injectable_parameters, is_injectable_type
from wirekit.domain import DIException, IContainer, IResolver, UnresolvableError


class DependencyResolver(IResolver):
    """Resolves dependencies using constructor introspection and type hints.

    Every constructor parameter without a default must be annotated with a class;
    that class is resolved from the container, depth first.
    """

    def resolve_dependencies(self, dependency_type: Type, container: IContainer) -> Any:
        """Resolve all constructor dependencies and create instance.

        Args:
            dependency_type: The type to instantiate.
            container: The container to resolve dependencies from.

        Returns:
            Instance with all dependencies injected.

        Raises:
            UnresolvableError: If a parameter lacks a usable type hint or the constructor fails.
            UnregisteredDependencyError: If a parameter type was never registered.
            RuntimeCircularResolutionError: If a parameter type is already being constructed.

        Example:
            >>> class UserService:
            ...     def __init__(self, db: DatabaseConnection, logger: Logger):
            ...         self.db = db
            ...         self.logger = logger
            >>>
            >>> resolver = DependencyResolver()
            >>> instance = resolver.resolve_dependencies(UserService, container)
        """
        kwargs = {}
        for param_name, param_type in injectable_parameters(dependency_type):
            if param_type is inspect.Parameter.empty:
                raise UnresolvableError(
                    dependency_type,
                    f"Parameter '{param_name}' lacks type hint and has no default value.",
                )
            if not is_injectable_type(param_type):
                raise UnresolvableError(
                    dependency_type,
                    f"Parameter '{param_name}' is annotated with {param_type!r}, which is not an injectable class.",
                )

            kwargs[param_name] = container.resolve(param_type)

        try:
            return dependency_type(**kwargs)
        except DIException:
            raise
        except Exception as e:
            raise UnresolvableError(
                dependency_type,
                f"Failed to construct {dependency_type.__name__}: {e}",
            ) from e
