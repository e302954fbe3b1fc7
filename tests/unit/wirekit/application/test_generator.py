"""Unit tests for InjectionGenerator."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from wirekit.application.generator import InjectionGenerator
from wirekit.domain import (
    ClassKind,
    ClassMetadata,
    ClassUnit,
    CyclicDependencyError,
    DuplicateClassNameError,
    ExportNameConflictError,
    GeneratorSettings,
    IArtifactWriter,
    ISourceScanner,
    ScanResult,
    UnloadableSource,
)


def make_unit(name, dependencies=(), guards=(), module="app.services"):
    return ClassUnit(
        name=name,
        module=module,
        origin=Path("app/services.py"),
        kind=ClassKind.INJECTABLE,
        metadata=ClassMetadata(
            name=name,
            is_injectable=True,
            constructor_dependency_names=tuple(dependencies),
            guard_dependency_names=tuple(guards),
        ),
    )


class FakeScanner(ISourceScanner):
    def __init__(self, units: List[ClassUnit], failures: Optional[List[UnloadableSource]] = None) -> None:
        self.result = ScanResult(units=units, failures=failures or [])

    def scan(self) -> ScanResult:
        return self.result


class MemoryWriter(IArtifactWriter):
    def __init__(self) -> None:
        self.files: Dict[Path, str] = {}
        self.writes = 0

    def read(self, path: Path) -> Optional[str]:
        return self.files.get(path)

    def write(self, path: Path, content: str) -> None:
        self.writes += 1
        self.files[path] = content


class Clock:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return datetime(2024, 1, self.calls, tzinfo=timezone.utc)


@pytest.fixture
def settings(tmp_path):
    return GeneratorSettings(project_root=tmp_path, output_file=Path("src/injection.py"))


class TestGenerate:
    """Test cases for InjectionGenerator.generate."""

    def test_writes_module_in_dependency_order(self, settings):
        """Test the services, guard and controller scenario end to end."""
        scanner = FakeScanner(
            [
                make_unit("ServiceA"),
                make_unit("GuardG"),
                make_unit("ServiceB", ["ServiceA"]),
                make_unit("ControllerC", ["ServiceB"], guards=["GuardG"]),
            ]
        )
        writer = MemoryWriter()

        result = InjectionGenerator(settings, scanner, writer, clock=Clock()).generate()

        assert result.ordering == ["ServiceA", "GuardG", "ServiceB", "ControllerC"]
        assert result.output_file == settings.output_path
        content = writer.files[settings.output_path]
        registrations = [line for line in content.splitlines() if line.startswith("_container.register")]
        assert registrations == [
            "_container.register(ServiceA)",
            "_container.register(GuardG)",
            "_container.register(ServiceB)",
            "_container.register(ControllerC)",
        ]

    def test_cycle_writes_nothing(self, settings):
        """Test that a cyclic graph leaves the previous artifact untouched."""
        writer = MemoryWriter()
        writer.files[settings.output_path] = "previous"
        scanner = FakeScanner([make_unit("X", ["Y"]), make_unit("Y", ["X"])])

        with pytest.raises(CyclicDependencyError) as exc_info:
            InjectionGenerator(settings, scanner, writer).generate()

        assert exc_info.value.node in {"X", "Y"}
        assert writer.writes == 0
        assert writer.files[settings.output_path] == "previous"

    def test_unexportable_class_name_writes_nothing(self, settings):
        """Test that a class exported under a keyword keeps the previous artifact."""
        writer = MemoryWriter()
        writer.files[settings.output_path] = "previous"
        scanner = FakeScanner([make_unit("ServiceA"), make_unit("Lambda", ["ServiceA"])])

        with pytest.raises(ExportNameConflictError):
            InjectionGenerator(settings, scanner, writer).generate()

        assert writer.writes == 0
        assert writer.files[settings.output_path] == "previous"

    def test_name_collision_writes_nothing(self, settings):
        """Test that duplicate class names abort the pass."""
        writer = MemoryWriter()
        scanner = FakeScanner([make_unit("Service", module="app.a"), make_unit("Service", module="app.b")])

        with pytest.raises(DuplicateClassNameError):
            InjectionGenerator(settings, scanner, writer).generate()

        assert writer.writes == 0

    def test_unknown_dependency_is_reported_and_class_still_registered(self, settings, caplog):
        """Test that a dependency on an unscanned class does not drop the dependent."""
        writer = MemoryWriter()
        scanner = FakeScanner([make_unit("Z", ["W"])])

        with caplog.at_level(logging.WARNING, logger="wirekit.application.generator"):
            result = InjectionGenerator(settings, scanner, writer).generate()

        assert result.ordering == ["Z"]
        assert result.unknown_dependencies == {"Z": ["W"]}
        assert "_container.register(Z)" in writer.files[settings.output_path]
        assert "Z depends on W" in caplog.text

    def test_scan_failures_are_reported(self, settings):
        """Test that files skipped by the scanner appear in the result."""
        failure = UnloadableSource(path=Path("app/broken.py"), reason="SyntaxError: invalid syntax")
        scanner = FakeScanner([make_unit("ServiceA")], [failure])

        result = InjectionGenerator(settings, scanner, MemoryWriter()).generate()

        assert result.failures == [failure]
        assert result.ordering == ["ServiceA"]

    def test_rerun_is_unchanged_except_timestamp(self, settings):
        """Test idempotence across passes."""
        writer = MemoryWriter()
        scanner = FakeScanner([make_unit("ServiceA"), make_unit("ServiceB", ["ServiceA"])])
        generator = InjectionGenerator(settings, scanner, writer, clock=Clock())

        first = generator.generate()
        first_content = writer.files[settings.output_path]
        second = generator.generate()
        second_content = writer.files[settings.output_path]

        assert first.changed
        assert not second.changed
        assert first_content != second_content
        assert writer.writes == 2

    def test_duplicate_units_are_emitted_once(self, settings):
        """Test that a class discovered twice is registered once."""
        writer = MemoryWriter()
        unit = make_unit("ServiceA")

        result = InjectionGenerator(settings, FakeScanner([unit, unit]), writer).generate()

        assert result.ordering == ["ServiceA"]
        assert writer.files[settings.output_path].count("_container.register(ServiceA)") == 1

    def test_logs_summary(self, settings, caplog):
        """Test the summary log line."""
        with caplog.at_level(logging.INFO, logger="wirekit.application.generator"):
            InjectionGenerator(settings, FakeScanner([make_unit("ServiceA")]), MemoryWriter()).generate()

        assert "with 1 injectable services or gateways" in caplog.text
