from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from wirekit.domain.enums import ClassKind, EntryState

if TYPE_CHECKING:
    from wirekit.domain.interfaces import IContainer


class Registration(BaseModel):
    """Value object representing a dependency registration.

    Attributes:
        dependency_type: The type being registered.
        builder: Optional factory that receives the container and returns the instance.
            When absent the type is auto-wired from its constructor.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    dependency_type: Type = Field(..., description="The dependency type to be registered.")
    builder: Optional[Callable[["IContainer"], Any]] = Field(
        default=None, description="The builder function to create an instance of the class."
    )


class ContainerEntry(BaseModel):
    """Binding of a class identity to its definition and cached singleton.

    Attributes:
        registration: The original registration configuration.
        state: Where the entry is in its lifecycle.
        cached_instance: The singleton once resolved.
        resolution_count: Number of times this dependency has been resolved.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    registration: Registration = Field(..., description="The registration details of the dependency.")
    state: EntryState = Field(default=EntryState.REGISTERED, description="Lifecycle state of the entry.")
    cached_instance: Optional[Any] = Field(default=None, description="Cached singleton instance.")
    resolution_count: int = Field(default=0, description="Number of times this dependency has been resolved.")


class ClassMetadata(BaseModel):
    """Declared identity and dependencies of one class.

    Attributes:
        name: The class name, used as graph identity.
        is_injectable: Whether the class was marked injectable (services, controllers, guards).
        is_socket_controller: Whether the class was marked as a socket controller.
        kind: Role of the class, if it was marked at all.
        constructor_dependency_names: Class names of injected constructor parameters, in order.
        guard_dependency_names: Guard class names attached at class or method level.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    is_injectable: bool = False
    is_socket_controller: bool = False
    kind: Optional[ClassKind] = None
    constructor_dependency_names: Tuple[str, ...] = ()
    guard_dependency_names: Tuple[str, ...] = ()

    @property
    def dependency_names(self) -> Tuple[str, ...]:
        """Constructor and guard dependencies, de-duplicated, constructor first."""
        return tuple(dict.fromkeys(self.constructor_dependency_names + self.guard_dependency_names))


class ClassUnit(BaseModel):
    """A class discovered by one scan pass.

    Attributes:
        name: Class name.
        module: Dotted module name the class is imported from.
        origin: Source file path.
        kind: Role of the class.
        metadata: Extracted metadata.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    module: str
    origin: Path
    kind: ClassKind
    metadata: ClassMetadata


class DependencyGraph(BaseModel):
    """Mapping from class name to the names it depends on.

    Keys keep discovery order. Dependency names that are not themselves keys are
    unknown and carry no ordering constraint.
    """

    edges: Dict[str, List[str]] = Field(default_factory=dict)

    def add_node(self, name: str, dependencies: Tuple[str, ...] = ()) -> None:
        """Add a node, merging dependencies into an existing one with set semantics."""
        existing = self.edges.setdefault(name, [])
        for dependency in dependencies:
            if dependency not in existing:
                existing.append(dependency)

    def dependencies_of(self, name: str) -> List[str]:
        return list(self.edges.get(name, []))

    def names(self) -> List[str]:
        return list(self.edges)

    def unknown_dependencies(self) -> Dict[str, List[str]]:
        """Get, per node, dependency names that are not nodes of the graph."""
        unknown: Dict[str, List[str]] = {}
        for name, dependencies in self.edges.items():
            missing = [dependency for dependency in dependencies if dependency not in self.edges]
            if missing:
                unknown[name] = missing
        return unknown

    def __contains__(self, name: object) -> bool:
        return name in self.edges

    def __len__(self) -> int:
        return len(self.edges)


class UnloadableSource(BaseModel):
    """A source file skipped during scanning, with the reason."""

    path: Path
    reason: str


class ScanResult(BaseModel):
    """Output of one scan pass.

    Attributes:
        units: Injectable and socket classes, in discovery order.
        failures: Files that could not be loaded.
    """

    units: List[ClassUnit] = Field(default_factory=list)
    failures: List[UnloadableSource] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Summary of one generation pass.

    Attributes:
        output_file: Path of the written registration module.
        ordering: Class names in registration order.
        failures: Files skipped while scanning.
        unknown_dependencies: Per class, dependency names no scanned class provides.
        changed: Whether the content differs from the previous artifact, timestamp ignored.
    """

    output_file: Path
    ordering: List[str] = Field(default_factory=list)
    failures: List[UnloadableSource] = Field(default_factory=list)
    unknown_dependencies: Dict[str, List[str]] = Field(default_factory=dict)
    changed: bool = True
