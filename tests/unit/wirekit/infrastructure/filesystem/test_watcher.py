"""Unit tests for PollingWatcher."""

import logging
import os
import threading

from wirekit.infrastructure.filesystem import PollingWatcher


def bump_mtime(path, delta_ns=1_000_000_000):
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + delta_ns))


class TestPollingWatcher:
    """Test cases for PollingWatcher."""

    def test_snapshot_skips_vanished_files(self, tmp_path):
        """Test that a listed file that no longer exists is ignored."""
        present = tmp_path / "a.py"
        present.write_text("", encoding="utf-8")
        watcher = PollingWatcher(lambda: [present, tmp_path / "gone.py"], lambda: None)

        assert list(watcher.snapshot()) == [present]

    def test_poll_without_change(self, tmp_path):
        """Test that an unchanged tree does not fire."""
        path = tmp_path / "a.py"
        path.write_text("", encoding="utf-8")
        calls = []
        watcher = PollingWatcher(lambda: [path], lambda: calls.append(1))

        watcher.poll(watcher.snapshot())

        assert calls == []

    def test_poll_detects_modification(self, tmp_path, caplog):
        """Test that a changed mtime fires the callback."""
        path = tmp_path / "a.py"
        path.write_text("", encoding="utf-8")
        calls = []
        watcher = PollingWatcher(lambda: [path], lambda: calls.append(1))
        before = watcher.snapshot()

        bump_mtime(path)
        with caplog.at_level(logging.INFO, logger="wirekit.infrastructure.filesystem.watcher"):
            after = watcher.poll(before)

        assert calls == [1]
        assert after != before
        assert "File changed, regenerating" in caplog.text
        assert str(path) in caplog.text

    def test_poll_detects_added_and_removed_files(self, tmp_path):
        """Test that a change in the file set fires the callback."""
        first = tmp_path / "a.py"
        second = tmp_path / "b.py"
        first.write_text("", encoding="utf-8")
        files = [first]
        calls = []
        watcher = PollingWatcher(lambda: list(files), lambda: calls.append(1))

        state = watcher.snapshot()
        second.write_text("", encoding="utf-8")
        files.append(second)
        state = watcher.poll(state)
        files.remove(first)
        watcher.poll(state)

        assert calls == [1, 1]

    def test_run_stops(self, tmp_path):
        """Test that run returns once stop is called."""
        watcher = PollingWatcher(lambda: [], lambda: None, interval=0.01)
        thread = threading.Thread(target=watcher.run)
        thread.start()

        watcher.stop()
        thread.join(5)

        assert not thread.is_alive()
