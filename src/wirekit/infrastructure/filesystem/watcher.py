import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable

logger = logging.getLogger(__name__)


class PollingWatcher:
    """Calls ``on_change`` whenever the set of watched files or their mtimes change.

    Attributes:
        _list_files: Returns the files to watch.
        _on_change: Callback run on each detected change.
        _interval: Seconds between polls.
    """

    def __init__(
        self,
        list_files: Callable[[], Iterable[Path]],
        on_change: Callable[[], object],
        interval: float = 1.0,
    ) -> None:
        self._list_files = list_files
        self._on_change = on_change
        self._interval = interval
        self._stop = threading.Event()

    def snapshot(self) -> Dict[Path, int]:
        stamps = {}
        for path in self._list_files():
            try:
                stamps[path] = path.stat().st_mtime_ns
            except FileNotFoundError:
                continue
        return stamps

    def poll(self, previous: Dict[Path, int]) -> Dict[Path, int]:
        """Compare against ``previous``, run the callback on change, return the new snapshot."""
        current = self.snapshot()
        if current != previous:
            paths = current.keys() | previous.keys()
            changed = sorted(str(path) for path in paths if current.get(path) != previous.get(path))
            logger.info("File changed, regenerating: %s", ", ".join(changed))
            self._on_change()
        return current

    def run(self) -> None:
        """Poll until ``stop`` is called."""
        state = self.snapshot()
        while not self._stop.wait(self._interval):
            state = self.poll(state)

    def stop(self) -> None:
        self._stop.set()
