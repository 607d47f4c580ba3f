"""
Session reconstruction for a single player.

Connect events are held on a stack until a disconnect arrives; each matched
pair becomes a Session, and sessions are grouped into calendar-day buckets.
Events must be applied in chronological order per player.
"""

import logging
from datetime import date, datetime, timedelta
from enum import Enum
from typing import List

from .errors import RejectedSession
from .events import PlayerEvent

logger = logging.getLogger(__name__)


class Session:
    """One continuous interval a player was connected"""

    __slots__ = ('_start', '_stop', '_duration')

    def __init__(self, start: datetime, stop: datetime):
        self._start = start
        self._stop = stop
        self._duration = stop - start

    @classmethod
    def build(cls, joined: PlayerEvent, left: PlayerEvent) -> 'Session':
        # No validation: a left event earlier than joined yields a negative duration
        return cls(joined.timestamp, left.timestamp)

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def stop(self) -> datetime:
        return self._stop

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def is_negative(self) -> bool:
        return self._duration < timedelta(0)

    def __eq__(self, other):
        if not isinstance(other, Session):
            return NotImplemented
        return (self._start, self._stop) == (other._start, other._stop)

    def __hash__(self):
        return hash((self._start, self._stop))

    def __repr__(self):
        return f"Session({self._start.isoformat()} -> {self._stop.isoformat()}, {self._duration})"


class PlayerDay:
    """Sessions of one player that started on the same calendar date"""

    def __init__(self, day: date):
        self.date = day
        self.sessions: List[Session] = []
        self.total_time = timedelta(0)

    def add_session(self, session: Session):
        """Accept the session if it starts on this day, otherwise raise RejectedSession"""
        if session.start.date() != self.date:
            raise RejectedSession(session, self.date)
        self.sessions.append(session)
        self.total_time += session.duration

    def __len__(self):
        return len(self.sessions)

    def __repr__(self):
        return f"PlayerDay({self.date.isoformat()}, sessions={len(self.sessions)}, total={self.total_time})"


class PlayerState(Enum):
    IDLE = "idle"
    AWAITING_DISCONNECT = "awaiting_disconnect"


class PlayerData:
    """All reconstructed activity for one player"""

    def __init__(self, name: str):
        self.name = name
        self.pending_events: List[PlayerEvent] = []
        self.days: List[PlayerDay] = []
        self.total_time = timedelta(0)

    @property
    def state(self) -> PlayerState:
        if self.pending_events:
            return PlayerState.AWAITING_DISCONNECT
        return PlayerState.IDLE

    @property
    def sessions(self) -> List[Session]:
        """All completed sessions in the order they were added"""
        return [session for day in self.days for session in day.sessions]

    @property
    def session_count(self) -> int:
        return sum(len(day) for day in self.days)

    def add_event(self, event: PlayerEvent):
        """
        Apply the next event for this player.

        Connects are pushed. A disconnect pairs with the most recently pushed
        pending event; with nothing pending it is kept as pending itself.
        """
        if event.is_connect:
            self.pending_events.append(event)
            return

        if not self.pending_events:
            self.pending_events.append(event)
            return

        joined = self.pending_events.pop()
        self.add_session(Session.build(joined, event))

    def add_session(self, session: Session):
        if session.is_negative:
            logger.warning(
                f"Negative session for {self.name}: {session.start} -> {session.stop} ({session.duration})"
            )

        if not self.days:
            self.days.append(PlayerDay(session.start.date()))

        try:
            self.days[-1].add_session(session)
        except RejectedSession:
            day = PlayerDay(session.start.date())
            day.add_session(session)
            self.days.append(day)

        self.total_time += session.duration

    def __repr__(self):
        return (f"PlayerData({self.name!r}, days={len(self.days)}, "
                f"pending={len(self.pending_events)}, total={self.total_time})")
