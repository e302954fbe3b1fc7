import os
import tempfile
from pathlib import Path
from typing import Optional

from wirekit.domain import IArtifactWriter


class ArtifactWriter(IArtifactWriter):
    """Writes the generated module as a whole-file replacement.

    Content goes to a temporary file next to the target, which then replaces the
    target, so readers never observe a partially written module.
    """

    def read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, path: Path, content: str) -> None:
        """Replace the file at ``path``, creating parent directories as needed.

        Args:
            path: Target file.
            content: Full file content.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
            os.replace(temp_name, path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
