from pathlib import Path
from typing import Optional, Sequence, Type


class DIException(Exception):
    """Base exception for DI-related errors."""


class CyclicDependencyError(DIException):
    """Raised when the static dependency graph contains a cycle.

    Attributes:
        node: Name of the class where the cycle was closed.
        cycle: Class names along the cycle, first and last entries equal.
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        self.node = self.cycle[0]
        message = f"Cyclic dependency detected at {self.node}: {' -> '.join(self.cycle)}"
        super().__init__(message)


class DuplicateClassNameError(DIException):
    """Raised when two different classes share one name in the scanned tree.

    Attributes:
        name: The colliding class name.
        modules: Modules defining a class with that name.
    """

    def __init__(self, name: str, modules: Sequence[str]) -> None:
        self.name = name
        self.modules = list(modules)
        message = f"Class name {name} is defined in more than one module: {', '.join(self.modules)}"
        super().__init__(message)


class UnloadableSourceError(DIException):
    """Raised when a source file cannot be loaded during scanning.

    Attributes:
        path: The file that failed to load.
        reason: Description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class UnregisteredDependencyError(DIException):
    """Raised when resolving an identity that was never registered.

    Attributes:
        identity: The class type with no registration.
    """

    def __init__(self, identity: Type) -> None:
        self.identity = identity
        super().__init__(f"No registration for dependency: {identity.__name__}")


class RuntimeCircularResolutionError(DIException):
    """Raised when a type is resolved again, on the same thread, while it is still being constructed.

    Attributes:
        node: Name of the class whose construction was re-entered.
        cycle: Class names along the resolution chain, first and last entries equal.
    """

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        self.node = self.cycle[0]
        super().__init__(f"Circular resolution detected at {self.node}: {' -> '.join(self.cycle)}")


class ExportNameConflictError(DIException):
    """Raised when a class name cannot be exported from the generated module.

    The exported name is the class name with a lower-cased first character; it must
    be a valid identifier that shadows none of the other names the module binds.

    Attributes:
        name: The class name.
        export: The export name derived from it.
        reason: Why the export name is unusable.
    """

    def __init__(self, name: str, export: str, reason: str) -> None:
        self.name = name
        self.export = export
        self.reason = reason
        super().__init__(f"Cannot export class {name} as '{export}': {reason}")


class UnresolvableError(DIException):
    """Raised when a registered dependency cannot be constructed.

    This occurs when:
    - Constructor parameters lack type hints.
    - Type hint cannot be resolved.
    - The constructor or builder itself raises.

    Attributes:
        cls: The class type that could not be resolved.
        reason: Optional reason for the failure.
    """

    def __init__(self, cls: Type, reason: Optional[str] = None) -> None:
        self.cls = cls
        self.reason = reason
        message = f"Cannot resolve dependency for type: {cls.__name__}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class DuplicateRegistrationError(DIException):
    """Raised when the same type is registered twice in one container."""

    def __init__(self, identity: Type) -> None:
        self.identity = identity
        super().__init__(f"Dependency {identity.__name__} is already registered.")


class ContainerNotInstalledError(DIException):
    """Raised when the process container is requested before startup installed one."""
