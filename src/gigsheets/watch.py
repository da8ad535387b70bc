"""
Module: watch

Purpose:
    Regenerate output when watched files change. A polling watcher
    compares modification times of the config file and the gigs folder;
    changes feed a Debouncer so a burst of writes triggers one run.

Key Functions:
    - snapshot(): Modification times for a set of watched paths
    - changed_paths(): Paths created or modified between two snapshots
    - watch_paths(): Poll paths and call back on change until stopped
    - run_generate_watch(): Watch loop for the generate command

Key Classes:
    - Debouncer: Collapse rapid triggers into one callback
    - FileWatcher: Polling watcher over files and folders

Dependencies:
    - threading (std)
    - gigsheets.common.thresholds: Debounce and poll intervals

Used By:
    - cli: generate --watch, generate-schema --watch
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .common.thresholds import WATCH_THRESHOLDS

logger = logging.getLogger(__name__)

Snapshot = Dict[Path, float]


class Debouncer:
    """
    Run a callback once after triggers stop arriving for `delay` seconds.

    Each trigger() cancels the pending timer and starts a new one.
    Callbacks are serialized: a run never overlaps another run.

    Example:
        >>> debouncer = Debouncer(0.5, regenerate)
        >>> debouncer.trigger()
        >>> debouncer.trigger()  # only one regenerate() call follows
    """

    def __init__(self, delay: float, callback: Callable[[], None]):
        if delay < 0:
            raise ValueError(f"delay must be non-negative: {delay}")
        self.delay = delay
        self.callback = callback
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()

    def trigger(self) -> None:
        """Restart the debounce window."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop any pending callback."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        with self._run_lock:
            try:
                self.callback()
            except Exception as e:
                logger.error(f"Regeneration failed: {e}")


def _scan(path: Path) -> Iterable[Path]:
    if path.is_dir():
        yield from (p for p in path.iterdir() if p.is_file())
    elif path.exists():
        yield path


def snapshot(paths: Iterable[Path]) -> Snapshot:
    """Modification times of watched files (folders are listed one level deep)."""
    result: Snapshot = {}
    for path in paths:
        for file_path in _scan(Path(path)):
            try:
                result[file_path] = file_path.stat().st_mtime
            except OSError:
                # Removed between listing and stat
                continue
    return result


def changed_paths(before: Snapshot, after: Snapshot) -> List[Path]:
    """Paths created or modified between two snapshots, sorted."""
    return sorted(
        path for path, mtime in after.items()
        if before.get(path) != mtime
    )


class FileWatcher:
    """
    Polling watcher over a fixed set of files and folders.

    Attributes:
        paths: Files or folders to watch
        interval: Seconds between polls
    """

    def __init__(self, paths: Iterable[Path], interval: float = WATCH_THRESHOLDS.poll_interval_seconds):
        self.paths = [Path(p) for p in paths]
        self.interval = interval
        self._state = snapshot(self.paths)

    def poll(self) -> List[Path]:
        """Return paths changed since the previous poll."""
        current = snapshot(self.paths)
        changed = changed_paths(self._state, current)
        self._state = current
        return changed


def watch_paths(
    paths: Iterable[Path],
    on_change: Callable[[], None],
    *,
    stop_event: Optional[threading.Event] = None,
    debounce: float = WATCH_THRESHOLDS.debounce_seconds,
    interval: float = WATCH_THRESHOLDS.poll_interval_seconds,
) -> None:
    """
    Block and call `on_change` (debounced) whenever a watched path changes.

    Runs until `stop_event` is set or the process is interrupted.
    """
    stop_event = stop_event or threading.Event()
    watcher = FileWatcher(paths, interval=interval)
    debouncer = Debouncer(debounce, on_change)

    for path in watcher.paths:
        if not path.exists():
            logger.warning(f"Watched path does not exist: {path}")

    try:
        while not stop_event.wait(watcher.interval):
            for path in watcher.poll():
                logger.info(f"Detected change in {path}")
                debouncer.trigger()
    finally:
        debouncer.cancel()


def run_generate_watch(
    config_path: Path,
    gigs_dir: Path,
    regenerate: Callable[[], None],
    *,
    stop_event: Optional[threading.Event] = None,
) -> None:
    """
    Generate once, then regenerate whenever the config or a gig changes.

    Args:
        config_path: Config file to watch
        gigs_dir: Gigs folder to watch
        regenerate: Full regeneration callback
        stop_event: Optional event ending the loop
    """
    logger.info("Starting initial generation...")
    regenerate()

    logger.info("\nWatching for changes...")
    logger.info(f"Config file: {config_path}")
    logger.info(f"Gigs directory: {gigs_dir}")
    logger.info("Press Ctrl+C to stop")

    def _on_change() -> None:
        logger.info("\nRegenerating PDFs...")
        regenerate()

    watch_paths([config_path, gigs_dir], _on_change, stop_event=stop_event)
