"""Application layer - Serialising regeneration passes."""

import logging
import threading
from typing import Callable, Optional

from wirekit.domain import DIException, GenerationResult

logger = logging.getLogger(__name__)


class RegenerationScheduler:
    """Runs generation passes one at a time, coalescing triggers.

    A trigger arriving while a pass is running does not start a second pass; it
    marks the running pass dirty, and exactly one follow-up pass runs after it,
    however many triggers arrived meanwhile. The follow-up runs on the thread that
    owns the current pass.

    Attributes:
        _run_pass: Callable performing one generation pass.
        _running: Whether a pass is in flight.
        _pending: Whether a trigger arrived during the pass in flight.
    """

    def __init__(self, run_pass: Callable[[], GenerationResult]) -> None:
        self._run_pass = run_pass
        self._lock = threading.Lock()
        self._running = False
        self._pending = False
        self.last_result: Optional[GenerationResult] = None
        self.passes = 0

    def trigger(self) -> bool:
        """Request a generation pass.

        Returns:
            True if this call ran the pass(es), False if it was coalesced into the
            pass already running.
        """
        with self._lock:
            if self._running:
                self._pending = True
                return False
            self._running = True

        try:
            while True:
                self._run_once()
                with self._lock:
                    if not self._pending:
                        self._running = False
                        return True
                    self._pending = False
        except BaseException:
            with self._lock:
                self._running = False
                self._pending = False
            raise

    def _run_once(self) -> None:
        self.passes += 1
        try:
            self.last_result = self._run_pass()
        except (DIException, OSError) as e:
            # The previous artifact keeps serving; the next trigger retries.
            logger.error("Generation pass failed: %s", e)
        except Exception:
            logger.exception("Unexpected error during generation pass")
