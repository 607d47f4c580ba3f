import logging
import threading
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from .game_registry import GameRegistry
from .ingest import ingest_directory
from .log_source import DEFAULT_PATTERNS


class PlaytimeTracker:
    """Holds the registry built from a log directory and rebuilds it on demand"""

    def __init__(self, log_dir: str, patterns: Sequence[str] = DEFAULT_PATTERNS, workers: int = 4):
        self.logger = logging.getLogger(__name__)
        self.log_dir = log_dir
        self.patterns = tuple(patterns)
        self.workers = workers
        self.lock = threading.Lock()
        self._registry: Optional[GameRegistry] = None
        self.last_scan: Optional[Dict[str, Any]] = None

    @property
    def registry(self) -> GameRegistry:
        """Current registry, scanning the log directory on first use"""
        with self.lock:
            registry = self._registry
        if registry is None:
            registry = self.rescan()
        return registry

    def rescan(self) -> GameRegistry:
        """Rebuild the registry from scratch and swap it in"""
        self.logger.info(f"Scanning player logs in {self.log_dir}")
        registry = ingest_directory(self.log_dir, self.patterns, workers=self.workers)

        with self.lock:
            self._registry = registry
            self.last_scan = {
                'scanned_at': datetime.now().isoformat(),
                'log_dir': self.log_dir,
                'player_count': len(registry),
            }
        self.logger.info(f"Scan complete: {len(registry)} players")
        return registry
