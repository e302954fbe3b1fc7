"""Application layer - Rendering of the generated registration module."""

import keyword
import re
from datetime import datetime
from typing import Dict, Iterable, List

from wirekit.domain import ClassUnit, ExportNameConflictError, GeneratorSettings

BANNER = (
    "# This file is auto-generated by wirekit. Do not modify manually.",
    "# It registers all injectable, controller, guard and socket classes with the DI container.",
)
TIMESTAMP_PREFIX = "# Generated on: "

_TIMESTAMP_LINE = re.compile(rf"^{re.escape(TIMESTAMP_PREFIX)}.*$", re.MULTILINE)

CONTAINER_VARIABLE = "_container"


def instance_name(class_name: str) -> str:
    """Name of the exported instance: the class name with a lower-cased first character."""
    return class_name[:1].lower() + class_name[1:]


def strip_timestamp(content: str) -> str:
    """Remove the generation timestamp so two artifacts can be compared."""
    return _TIMESTAMP_LINE.sub(TIMESTAMP_PREFIX.rstrip(), content)


class RegistrationEmitter:
    """Renders the registration module for an ordered list of classes.

    The module imports every class, binds the process container to a private name,
    registers the classes in the given order and exports one resolved instance per
    class.

    Attributes:
        _container_module: Module providing the container accessor.
        _container_accessor: Accessor returning the process container.
    """

    def __init__(self, container_module: str = "wirekit", container_accessor: str = "current_container") -> None:
        self._container_module = container_module
        self._container_accessor = container_accessor

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "RegistrationEmitter":
        return cls(settings.container_module, settings.container_accessor)

    def render(self, units: Iterable[ClassUnit], generated_at: datetime) -> str:
        """Render the module text.

        Args:
            units: Classes in registration order.
            generated_at: Timestamp written into the banner.

        Returns:
            The module source, ending with a newline.

        Raises:
            ExportNameConflictError: If a class cannot be exported under its instance name.
        """
        units = list(units)
        self._check_exports(units)
        imports = sorted({f"from {unit.module} import {unit.name}" for unit in units})

        registrations: List[str] = [
            f"from {self._container_module} import {self._container_accessor}",
            "",
            f"{CONTAINER_VARIABLE} = {self._container_accessor}()",
            "",
        ]
        exports: List[str] = []
        for unit in units:
            registrations.append(f"{CONTAINER_VARIABLE}.register({unit.name})")
            exports.append(f"{instance_name(unit.name)} = {CONTAINER_VARIABLE}.resolve({unit.name})")

        lines = [
            *BANNER,
            f"{TIMESTAMP_PREFIX}{generated_at.isoformat()}",
            "",
            *imports,
            "",
            *registrations,
            "",
            *exports,
            "",
        ]
        return "\n".join(lines)

    def _check_exports(self, units: List[ClassUnit]) -> None:
        reserved = {CONTAINER_VARIABLE, self._container_accessor}
        class_names = {unit.name for unit in units}
        exported: Dict[str, str] = {}

        for unit in units:
            export = instance_name(unit.name)
            if unit.name in reserved:
                raise ExportNameConflictError(unit.name, export, "the class name is reserved by the generated module")
            if keyword.iskeyword(export):
                raise ExportNameConflictError(unit.name, export, "it is a Python keyword")
            if export in reserved:
                raise ExportNameConflictError(unit.name, export, "it shadows the container binding")
            # A lower-case class exports under its own name, which is harmless.
            if export != unit.name and export in class_names:
                raise ExportNameConflictError(unit.name, export, "it shadows another imported class")
            owner = exported.setdefault(export, unit.name)
            if owner != unit.name:
                raise ExportNameConflictError(unit.name, export, f"class {owner} exports the same name")
