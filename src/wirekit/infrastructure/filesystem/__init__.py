"""
Filesystem module.

Source scanning, artifact writing and change polling for the generator.
"""

from .scanner import SourceScanner, module_name_for
from .watcher import PollingWatcher
from .writer import ArtifactWriter

__all__ = [
    "SourceScanner",
    "ArtifactWriter",
    "PollingWatcher",
    "module_name_for",
]
