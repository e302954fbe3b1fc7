"""Application layer - The generation pass orchestrating scan, ordering and emission."""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from wirekit.application.emitter import RegistrationEmitter, strip_timestamp
from wirekit.application.graph_builder import DependencyGraphBuilder
from wirekit.application.sequencer import TopologicalSequencer
from wirekit.domain import ClassUnit, GenerationResult, GeneratorSettings, IArtifactWriter, ISourceScanner

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InjectionGenerator:
    """Runs one complete generation pass.

    Scans the source tree, builds and orders the dependency graph, renders the
    registration module and overwrites the artifact. Any error before the write
    leaves the previous artifact untouched.

    Attributes:
        _settings: Generator configuration.
        _scanner: Source of the injectable classes.
        _writer: Persists the artifact.
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        scanner: ISourceScanner,
        writer: IArtifactWriter,
        builder: Optional[DependencyGraphBuilder] = None,
        sequencer: Optional[TopologicalSequencer] = None,
        emitter: Optional[RegistrationEmitter] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._scanner = scanner
        self._writer = writer
        self._builder = builder or DependencyGraphBuilder()
        self._sequencer = sequencer or TopologicalSequencer()
        self._emitter = emitter or RegistrationEmitter.from_settings(settings)
        self._clock = clock

    def generate(self) -> GenerationResult:
        """Run the pass.

        Returns:
            Summary of the pass.

        Raises:
            CyclicDependencyError: If the class graph has a cycle.
            DuplicateClassNameError: If two classes share a name.
            ExportNameConflictError: If a class cannot be exported from the generated module.
            OSError: If the artifact cannot be written.
        """
        scan = self._scanner.scan()
        graph = self._builder.build(scan.units)
        ordering = self._sequencer.order(graph)

        unknown = graph.unknown_dependencies()
        for name, missing in unknown.items():
            logger.warning("%s depends on %s, which no scanned class provides", name, ", ".join(missing))

        units: Dict[str, ClassUnit] = {}
        for unit in scan.units:
            units.setdefault(unit.name, unit)

        content = self._emitter.render([units[name] for name in ordering], self._clock())

        output_path = self._settings.output_path
        previous = self._writer.read(output_path)
        changed = previous is None or strip_timestamp(previous) != strip_timestamp(content)
        self._writer.write(output_path, content)

        logger.info("Generated %s with %d injectable services or gateways.", output_path, len(ordering))
        return GenerationResult(
            output_file=output_path,
            ordering=ordering,
            failures=scan.failures,
            unknown_dependencies=unknown,
            changed=changed,
        )
