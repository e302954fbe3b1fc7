"""
wirekit: Build-time DI wiring generator with a singleton runtime container.

Public API exports for the wirekit package.
"""

# Application exports
from wirekit.application import (
    DIContainer,
    InjectionGenerator,
    current_container,
    install_container,
    uninstall_container,
)

# Domain exports
from wirekit.domain import (
    CanActivate,
    ClassKind,
    ContainerNotInstalledError,
    CyclicDependencyError,
    DIException,
    DuplicateClassNameError,
    DuplicateRegistrationError,
    ExportNameConflictError,
    GeneratorSettings,
    RuntimeCircularResolutionError,
    UnloadableSourceError,
    UnregisteredDependencyError,
    UnresolvableError,
    controller,
    guard,
    injectable,
    socket,
    use_guards,
)

__version__ = "0.1.0"

__all__ = [
    # Container
    "DIContainer",
    "install_container",
    "current_container",
    "uninstall_container",
    # Generation
    "InjectionGenerator",
    "GeneratorSettings",
    # Decorators
    "injectable",
    "controller",
    "guard",
    "socket",
    "use_guards",
    "CanActivate",
    # Enums
    "ClassKind",
    # Exceptions
    "DIException",
    "CyclicDependencyError",
    "DuplicateClassNameError",
    "UnloadableSourceError",
    "UnregisteredDependencyError",
    "RuntimeCircularResolutionError",
    "UnresolvableError",
    "DuplicateRegistrationError",
    "ExportNameConflictError",
    "ContainerNotInstalledError",
]
