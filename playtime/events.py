from datetime import datetime
from enum import Enum


class PlayerAction(Enum):
    """Connection state change recorded in the server log"""
    CONNECT = "connect"
    DISCONNECT = "disconnect"


class PlayerEvent:
    """A single connect or disconnect of one player at a point in time.

    Events sort by timestamp. Two events are equal only when name, action
    and timestamp all match.
    """

    __slots__ = ('_name', '_action', '_timestamp')

    def __init__(self, name: str, action: PlayerAction, timestamp: datetime):
        self._name = name
        self._action = action
        self._timestamp = timestamp

    @property
    def name(self) -> str:
        return self._name

    @property
    def action(self) -> PlayerAction:
        return self._action

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def is_connect(self) -> bool:
        return self._action is PlayerAction.CONNECT

    def __eq__(self, other):
        if not isinstance(other, PlayerEvent):
            return NotImplemented
        return (self._name, self._action, self._timestamp) == (other._name, other._action, other._timestamp)

    def __lt__(self, other):
        if not isinstance(other, PlayerEvent):
            return NotImplemented
        return self._timestamp < other._timestamp

    def __le__(self, other):
        if not isinstance(other, PlayerEvent):
            return NotImplemented
        return self._timestamp <= other._timestamp

    def __gt__(self, other):
        if not isinstance(other, PlayerEvent):
            return NotImplemented
        return self._timestamp > other._timestamp

    def __ge__(self, other):
        if not isinstance(other, PlayerEvent):
            return NotImplemented
        return self._timestamp >= other._timestamp

    def __hash__(self):
        return hash((self._name, self._action, self._timestamp))

    def __repr__(self):
        return f"PlayerEvent({self._name!r}, {self._action.name}, {self._timestamp.isoformat()})"
