from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_EXCLUDE_PATTERNS = [
    "**/test_*.py",
    "**/*_test.py",
    "**/conftest.py",
    "**/*_dto.py",
    "**/dto.py",
    "**/__main__.py",
]


class GeneratorSettings(BaseSettings):
    """Configuration of the registration module generator.

    Every field can be set from a ``WIREKIT_``-prefixed environment variable, for
    example ``WIREKIT_SOURCE_DIR=app``. ``WIREKIT_SUFFIXES`` and
    ``WIREKIT_EXCLUDE_PATTERNS`` take comma separated lists. Keyword arguments take
    precedence over the environment. Relative paths are resolved against
    ``project_root``.

    Attributes:
        project_root: Base directory; exclusion patterns match paths relative to it.
        source_dir: Directory tree scanned for injectable classes.
        import_root: Directory on ``sys.path`` that module names are computed from.
        output_file: The generated registration module.
        suffixes: Recognised source file suffixes.
        exclude_patterns: Glob patterns of files never scanned.
        container_module: Module the generated code imports the container accessor from.
        container_accessor: Name of the accessor returning the process container.
    """

    model_config = SettingsConfigDict(env_prefix="WIREKIT_", env_ignore_empty=True, frozen=True)

    project_root: Path = Field(default_factory=Path.cwd)
    source_dir: Path = Path("src")
    import_root: Optional[Path] = None
    output_file: Path = Path("src/injection.py")
    suffixes: Annotated[List[str], NoDecode] = Field(default_factory=lambda: [".py"])
    exclude_patterns: Annotated[List[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    container_module: str = "wirekit"
    container_accessor: str = "current_container"

    @field_validator("suffixes", "exclude_patterns", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def _absolute(self, path: Path) -> Path:
        return path if path.is_absolute() else (self.project_root / path)

    @property
    def source_path(self) -> Path:
        return self._absolute(self.source_dir).resolve()

    @property
    def import_path(self) -> Path:
        """Import root, defaulting to the scanned source directory."""
        if self.import_root is None:
            return self.source_path
        return self._absolute(self.import_root).resolve()

    @property
    def output_path(self) -> Path:
        return self._absolute(self.output_file).resolve()
