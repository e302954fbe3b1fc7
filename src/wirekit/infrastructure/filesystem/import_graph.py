"""Ordering of source files by the imports between them."""

import ast
import logging
from pathlib import Path
from typing import Dict, List, Optional

from wirekit.application import TopologicalSequencer
from wirekit.domain import CyclicDependencyError, DependencyGraph

logger = logging.getLogger(__name__)


def imported_modules(source: str, module_name: str, is_package: bool = False) -> List[str]:
    """Absolute names of the modules a source file imports.

    ``from package import name`` yields both ``package`` and ``package.name``, since
    ``name`` may be a submodule.

    Args:
        source: The file content.
        module_name: Dotted name of the file's own module, to resolve relative imports.
        is_package: Whether the file is a package ``__init__``.
    """
    tree = ast.parse(source)
    package_parts = module_name.split(".") if is_package else module_name.split(".")[:-1]
    modules: List[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            base = _absolute_base(node, package_parts)
            if base is None:
                continue
            if base:
                modules.append(base)
            modules.extend(f"{base}.{alias.name}" if base else alias.name for alias in node.names)

    return list(dict.fromkeys(modules))


def _absolute_base(node: ast.ImportFrom, package_parts: List[str]) -> Optional[str]:
    if not node.level:
        return node.module or ""
    if node.level - 1 > len(package_parts):
        return None
    parts = package_parts[: len(package_parts) - (node.level - 1)]
    if node.module:
        parts = parts + node.module.split(".")
    return ".".join(parts)


def order_by_imports(files: Dict[Path, str], sequencer: Optional[TopologicalSequencer] = None) -> List[Path]:
    """Order files so each comes after the scanned files it imports.

    Args:
        files: File path to dotted module name, in the fallback order.
        sequencer: Sequencer used for ordering.

    Returns:
        The files in load order. On an import cycle between files, or a file that
        cannot be parsed, the given order is kept for the files concerned.
    """
    sequencer = sequencer or TopologicalSequencer()
    by_module = {module: str(path) for path, module in files.items()}

    graph = DependencyGraph()
    for path, module in files.items():
        try:
            source = path.read_text(encoding="utf-8")
            imports = imported_modules(source, module, path.name == "__init__.py")
        except (OSError, SyntaxError, ValueError) as e:
            # Reported again when the file is loaded.
            logger.debug("Cannot parse imports of %s: %s", path, e)
            imports = []
        dependencies = tuple(by_module[name] for name in imports if name in by_module and by_module[name] != str(path))
        graph.add_node(str(path), dependencies)

    try:
        return [Path(name) for name in sequencer.order(graph)]
    except CyclicDependencyError as e:
        logger.warning("Import cycle between source files (%s); loading in directory order", " -> ".join(e.cycle))
        return list(files)
