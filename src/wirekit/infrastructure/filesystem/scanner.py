"""Discovery of injectable classes in a source tree."""

import importlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterator, List, Optional

from wirekit.application import MetadataExtractor
from wirekit.domain import (
    ClassKind,
    ClassUnit,
    GeneratorSettings,
    ISourceScanner,
    ScanResult,
    UnloadableSource,
    UnloadableSourceError,
)
from wirekit.infrastructure.filesystem.import_graph import order_by_imports
from wirekit.infrastructure.filesystem.patterns import is_excluded

logger = logging.getLogger(__name__)


def module_name_for(path: Path, import_root: Path) -> str:
    """Dotted module name of a file relative to the import root.

    Raises:
        ValueError: If the file is outside the import root or its path is not importable.
    """
    parts = list(path.relative_to(import_root).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]
    if not parts or not all(part.isidentifier() for part in parts):
        raise ValueError(f"{path} is not an importable module under {import_root}")
    return ".".join(parts)


class SourceScanner(ISourceScanner):
    """Scans a directory tree for injectable and socket controller classes.

    Every pass reloads the files from disk: modules previously loaded from under the
    source root are evicted from ``sys.modules`` first, so a pass reflects the current
    files and never a cached import. A file that fails to load is logged and skipped.

    Attributes:
        _settings: Generator configuration.
        _extractor: Reads metadata off the loaded classes.
    """

    def __init__(self, settings: GeneratorSettings, extractor: Optional[MetadataExtractor] = None) -> None:
        self._settings = settings
        self._extractor = extractor or MetadataExtractor()

    def find_source_files(self) -> List[Path]:
        """List candidate files under the source root, sorted per directory.

        Returns:
            Files with a recognised suffix that no exclusion pattern matches.
        """
        return list(self._walk(self._settings.source_path))

    def _walk(self, directory: Path) -> Iterator[Path]:
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                yield from self._walk(entry)
            elif self._is_candidate(entry):
                yield entry.resolve()

    def _is_candidate(self, path: Path) -> bool:
        if not any(path.name.endswith(suffix) for suffix in self._settings.suffixes):
            return False
        if path.resolve() == self._settings.output_path:
            return False
        try:
            relative = path.resolve().relative_to(self._settings.project_root.resolve()).as_posix()
        except ValueError:
            relative = path.as_posix()
        return not is_excluded(relative, self._settings.exclude_patterns)

    def scan(self) -> ScanResult:
        """Scan the source tree.

        Returns:
            The injectable and socket classes in discovery order, plus the files
            that could not be loaded.
        """
        import_root = self._settings.import_path
        result = ScanResult()

        modules: Dict[Path, str] = {}
        for path in self.find_source_files():
            try:
                modules[path] = module_name_for(path, import_root)
            except ValueError as e:
                logger.warning("Skipping %s: %s", path, e)
                result.failures.append(UnloadableSource(path=path, reason=str(e)))

        self._prepare_import_system(import_root)

        for path in order_by_imports(modules):
            module_name = modules[path]
            try:
                module = self._load(path, module_name)
            except UnloadableSourceError as e:
                logger.error("Error processing file %s: %s", path, e.reason)
                result.failures.append(UnloadableSource(path=path, reason=e.reason))
                continue
            result.units.extend(self._collect(module, path))

        logger.debug("Scanned %d files, found %d classes", len(modules), len(result.units))
        return result

    def _prepare_import_system(self, import_root: Path) -> None:
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))
        importlib.invalidate_caches()

        source_root = self._settings.source_path
        for name, module in list(sys.modules.items()):
            module_file = getattr(module, "__file__", None)
            if module_file and Path(module_file).resolve().is_relative_to(source_root):
                del sys.modules[name]

    def _load(self, path: Path, module_name: str) -> ModuleType:
        """Execute a source file as a fresh module registered under ``module_name``.

        Raises:
            UnloadableSourceError: If the file cannot be executed.
        """
        if module_name in sys.modules:
            # Already imported fresh this pass by an earlier file.
            return sys.modules[module_name]

        spec = importlib.util.spec_from_file_location(
            module_name,
            path,
            submodule_search_locations=[str(path.parent)] if path.name == "__init__.py" else None,
        )
        if spec is None or spec.loader is None:
            raise UnloadableSourceError(path, "no loader for file")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException as e:
            sys.modules.pop(module_name, None)
            # sys.exit() at import time marks the file unloadable; interrupts propagate.
            if isinstance(e, (Exception, SystemExit)):
                raise UnloadableSourceError(path, f"{type(e).__name__}: {e}") from e
            raise
        return module

    def _collect(self, module: ModuleType, path: Path) -> List[ClassUnit]:
        exported = getattr(module, "__all__", None)
        if exported is not None:
            candidates = [getattr(module, name, None) for name in exported]
        else:
            candidates = [obj for obj in vars(module).values() if getattr(obj, "__module__", None) == module.__name__]

        units = []
        for candidate in candidates:
            if not inspect.isclass(candidate):
                continue
            metadata = self._extractor.extract(candidate)
            if not (metadata.is_injectable or metadata.is_socket_controller):
                continue
            kind = metadata.kind or (ClassKind.SOCKET_CONTROLLER if metadata.is_socket_controller else ClassKind.INJECTABLE)
            units.append(
                ClassUnit(
                    name=metadata.name,
                    module=candidate.__module__,
                    origin=path,
                    kind=kind,
                    metadata=metadata,
                )
            )
        return units
