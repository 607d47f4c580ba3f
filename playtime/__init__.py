# Player session tracking for Minecraft server logs

from .events import PlayerAction, PlayerEvent
from .line_parser import parse_event
from .player_data import PlayerData, PlayerDay, Session
from .game_registry import GameRegistry
from .tracker import PlaytimeTracker

__all__ = [
    'PlayerAction',
    'PlayerEvent',
    'parse_event',
    'Session',
    'PlayerDay',
    'PlayerData',
    'GameRegistry',
    'PlaytimeTracker'
]
