"""
Tests for gigsheets.watch

Test Coverage:
- Debouncer: burst collapsing, cancel, error isolation
- snapshot()/changed_paths(): Change detection
- FileWatcher.poll()
- watch_paths(): Stop event handling
"""
import os
import threading
import time

import pytest

from gigsheets.watch import Debouncer, FileWatcher, changed_paths, snapshot, watch_paths


class TestDebouncer:
    """Tests for debounced callbacks."""

    def test_burst_of_triggers_runs_once(self):
        # Arrange
        calls = []
        done = threading.Event()

        def callback():
            calls.append(1)
            done.set()

        debouncer = Debouncer(0.05, callback)

        # Act
        for _ in range(5):
            debouncer.trigger()
        done.wait(timeout=2)
        time.sleep(0.1)

        # Assert
        assert calls == [1]
        assert debouncer.pending is False

    def test_cancel_drops_pending_callback(self):
        calls = []
        debouncer = Debouncer(0.05, lambda: calls.append(1))

        debouncer.trigger()
        debouncer.cancel()
        time.sleep(0.15)

        assert calls == []

    def test_callback_error_is_logged(self, caplog):
        done = threading.Event()

        def callback():
            done.set()
            raise RuntimeError("boom")

        debouncer = Debouncer(0.01, callback)
        debouncer.trigger()
        done.wait(timeout=2)
        time.sleep(0.05)

        assert "Regeneration failed: boom" in caplog.text

    def test_negative_delay_raises(self):
        with pytest.raises(ValueError, match="delay must be non-negative"):
            Debouncer(-1, lambda: None)


def test_snapshot_lists_folder_files(tmp_path):
    # Arrange
    (tmp_path / "gigs").mkdir()
    (tmp_path / "gigs" / "a.yaml").write_text("a", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("c", encoding="utf-8")

    # Act
    state = snapshot([tmp_path / "config.yaml", tmp_path / "gigs", tmp_path / "missing"])

    # Assert
    assert set(state) == {tmp_path / "config.yaml", tmp_path / "gigs" / "a.yaml"}


def test_changed_paths_reports_new_and_modified(tmp_path):
    a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
    before = {a: 1.0, b: 1.0}
    after = {a: 1.0, b: 2.0, c: 1.0}

    assert changed_paths(before, after) == [b, c]


def test_changed_paths_ignores_removed_files(tmp_path):
    assert changed_paths({tmp_path / "a": 1.0}, {}) == []


def test_file_watcher_detects_modification(tmp_path):
    # Arrange
    config = tmp_path / "config.yaml"
    config.write_text("v1", encoding="utf-8")
    watcher = FileWatcher([config])

    # Act
    stat = config.stat()
    os.utime(config, (stat.st_atime, stat.st_mtime + 10))
    first = watcher.poll()
    second = watcher.poll()

    # Assert
    assert first == [config]
    assert second == []


def test_watch_paths_returns_when_stopped(tmp_path):
    stop = threading.Event()
    stop.set()

    watch_paths([tmp_path], lambda: None, stop_event=stop, interval=0.01)
