#!/usr/bin/env python3
"""
Multi-file ingestion into a GameRegistry.

Files are parsed on worker threads. Parsed results come back through a
queue and a single consumer applies them to the registry in file order,
holding back any file that finishes before its predecessors.
"""

import os
import queue
import logging
import threading
from datetime import date
from typing import Dict, List, Optional, Sequence

from .errors import ParseFailure
from .events import PlayerEvent
from .game_registry import GameRegistry
from .line_parser import parse_event
from .log_source import DEFAULT_PATTERNS, find_log_files, read_log_lines, resolve_log_date

logger = logging.getLogger(__name__)


class LogScan:
    """Events parsed from one log file"""

    def __init__(self, path: str, log_date: date):
        self.path = path
        self.log_date = log_date
        self.events: List[PlayerEvent] = []
        self.lines = 0
        self.skipped = 0

    def __repr__(self):
        return f"LogScan({os.path.basename(self.path)}, events={len(self.events)}, skipped={self.skipped})"


def parse_lines(lines, log_date: date, scan: LogScan) -> LogScan:
    for line in lines:
        scan.lines += 1
        try:
            _, event = parse_event(line, log_date)
        except ParseFailure:
            scan.skipped += 1
            continue
        scan.events.append(event)
    return scan


def scan_log_file(path: str) -> LogScan:
    """Parse every line of a log file, skipping lines that are not player events"""
    log_date = resolve_log_date(path)
    scan = parse_lines(read_log_lines(path), log_date, LogScan(path, log_date))
    logger.debug(f"{os.path.basename(path)}: {len(scan.events)} events, {scan.skipped} of {scan.lines} lines skipped")
    return scan


def ingest_log_files(paths: Sequence[str], registry: Optional[GameRegistry] = None,
                     workers: int = 4) -> GameRegistry:
    """
    Parse the files in parallel and apply their events to the registry.

    Events are applied strictly in the order of `paths`, so the caller must
    pass files in chronological order. The first file that cannot be read
    aborts the run once the workers have stopped.
    """
    if registry is None:
        registry = GameRegistry()
    if not paths:
        return registry

    work_queue: "queue.Queue" = queue.Queue()
    result_queue: "queue.Queue" = queue.Queue()
    stop = threading.Event()

    for index, path in enumerate(paths):
        work_queue.put((index, path))

    def worker():
        while not stop.is_set():
            try:
                index, path = work_queue.get_nowait()
            except queue.Empty:
                return
            try:
                result_queue.put((index, scan_log_file(path), None))
            except Exception as e:
                result_queue.put((index, None, e))

    threads = [
        threading.Thread(target=worker, name=f"log-scan-{n}", daemon=True)
        for n in range(max(1, min(workers, len(paths))))
    ]
    for thread in threads:
        thread.start()

    held: Dict[int, LogScan] = {}
    next_index = 0
    failure = None
    try:
        while next_index < len(paths):
            index, scan, error = result_queue.get()
            if error is not None:
                failure = error
                break
            held[index] = scan

            while next_index in held:
                scan = held.pop(next_index)
                applied = registry.add_events(scan.events)
                logger.info(f"Applied {applied} events from {os.path.basename(scan.path)} ({scan.log_date})")
                next_index += 1
    finally:
        stop.set()
        for thread in threads:
            thread.join()

    if failure is not None:
        logger.error(f"Log ingestion aborted: {failure}")
        raise failure

    return registry


def ingest_directory(log_dir: str, patterns: Sequence[str] = DEFAULT_PATTERNS,
                     workers: int = 4, registry: Optional[GameRegistry] = None) -> GameRegistry:
    """Find log files in a directory and ingest them in date order"""
    log_files = find_log_files(log_dir, patterns)
    logger.info(f"Found {len(log_files)} log files to process in {log_dir}")
    return ingest_log_files(log_files, registry=registry, workers=workers)
