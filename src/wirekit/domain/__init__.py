"""
Domain layer - Core business logic and models.

This layer contains the fundamental rules and models for dependency wiring.
It has no dependencies on other layers.
"""

from .decorators import controller, guard, injectable, socket, use_guards
from .enums import ClassKind, EntryState
from .exceptions import (
    ContainerNotInstalledError,
    CyclicDependencyError,
    DIException,
    DuplicateClassNameError,
    DuplicateRegistrationError,
    ExportNameConflictError,
    RuntimeCircularResolutionError,
    UnloadableSourceError,
    UnregisteredDependencyError,
    UnresolvableError,
)
from .interfaces import CanActivate, IArtifactWriter, IContainer, ILifetimeManager, IResolver, ISourceScanner
from .metadata import MetadataStore, metadata_store
from .models import (
    ClassMetadata,
    ClassUnit,
    ContainerEntry,
    DependencyGraph,
    GenerationResult,
    Registration,
    ScanResult,
    UnloadableSource,
)
from .settings import GeneratorSettings

# Rebuild Pydantic models to resolve forward references
Registration.model_rebuild()
ContainerEntry.model_rebuild()

__all__ = [
    # Decorators
    "injectable",
    "controller",
    "guard",
    "socket",
    "use_guards",
    # Enums
    "ClassKind",
    "EntryState",
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
    # Interfaces
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    "ISourceScanner",
    "IArtifactWriter",
    "CanActivate",
    # Metadata
    "MetadataStore",
    "metadata_store",
    # Models
    "Registration",
    "ContainerEntry",
    "ClassMetadata",
    "ClassUnit",
    "DependencyGraph",
    "UnloadableSource",
    "ScanResult",
    "GenerationResult",
    # Settings
    "GeneratorSettings",
]
