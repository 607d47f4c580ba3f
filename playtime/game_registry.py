import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from .events import PlayerEvent
from .player_data import PlayerData


class GameRegistry:
    """
    Per-player aggregates for one run.

    Not thread safe: events must be applied by a single consumer, in
    chronological order per player.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._players: Dict[str, PlayerData] = {}

    def add_event(self, event: PlayerEvent):
        """Route an event to its player, creating the player on first sight"""
        player_data = self._players.get(event.name)
        if player_data is None:
            player_data = PlayerData(event.name)
            self._players[event.name] = player_data
            self.logger.debug(f"New player seen: {event.name}")
        player_data.add_event(event)

    def add_events(self, events: Iterable[PlayerEvent]) -> int:
        count = 0
        for event in events:
            self.add_event(event)
            count += 1
        return count

    def get(self, name: str) -> Optional[PlayerData]:
        return self._players.get(name)

    def snapshot(self) -> Mapping[str, PlayerData]:
        """Read-only view of all players for reporting"""
        return MappingProxyType(self._players)

    def __contains__(self, name):
        return name in self._players

    def __len__(self):
        return len(self._players)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._players))
