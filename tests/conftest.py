"""Shared fixtures: throwaway source trees importable under a unique package name."""

import sys
import textwrap
import uuid
from pathlib import Path

import pytest

from wirekit.application import uninstall_container
from wirekit.domain import GeneratorSettings


class SourceTree:
    """A project directory with ``src/<package>/`` on ``sys.path``."""

    def __init__(self, root: Path, package: str) -> None:
        self.root = root
        self.src = root / "src"
        self.package = package
        self.package_dir = self.src / package
        self.package_dir.mkdir(parents=True)
        (self.package_dir / "__init__.py").write_text("", encoding="utf-8")

    def write(self, relative: str, content: str) -> Path:
        """Write a file under the package; ``{pkg}`` in the content is the package name."""
        path = self.package_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).replace("{pkg}", self.package), encoding="utf-8")
        return path

    @property
    def output_file(self) -> Path:
        return self.package_dir / "injection.py"

    def settings(self, **overrides) -> GeneratorSettings:
        values = {
            "project_root": self.root,
            "source_dir": Path("src"),
            "output_file": Path("src") / self.package / "injection.py",
        }
        values.update(overrides)
        return GeneratorSettings(**values)


@pytest.fixture
def source_tree(tmp_path, monkeypatch):
    """Create an empty package in a temporary project and clean up its modules afterwards."""
    package = f"wk_app_{uuid.uuid4().hex[:10]}"
    tree = SourceTree(tmp_path.resolve() / "project", package)
    monkeypatch.syspath_prepend(str(tree.src))

    yield tree

    for name in list(sys.modules):
        if name == package or name.startswith(f"{package}."):
            del sys.modules[name]


@pytest.fixture(autouse=True)
def no_installed_container():
    """Make sure no test leaks an installed process container."""
    uninstall_container()
    yield
    uninstall_container()
