"""
Text and JSON views over a GameRegistry.
"""

from datetime import timedelta
from typing import Any, Dict, List, Optional

from .game_registry import GameRegistry
from .player_data import PlayerData, Session


def duration_hhmmss(duration: timedelta) -> str:
    """Format a duration as HH:MM:SS. Hours are not wrapped at 24."""
    total_seconds = int(duration.total_seconds())
    sign = '-' if total_seconds < 0 else ''
    total_seconds = abs(total_seconds)

    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_session(session: Session) -> str:
    return f"@ {session.start.time().isoformat()} - duration: {duration_hhmmss(session.duration)}"


def format_player(player_data: PlayerData) -> List[str]:
    lines = [f"{player_data.name}: total time = {duration_hhmmss(player_data.total_time)}"]
    for day in player_data.days:
        lines.append(f"  {day.date.isoformat()} - daily total = {duration_hhmmss(day.total_time)}")
        for session in day.sessions:
            lines.append(f"      {format_session(session)}")
    return lines


def format_report(registry: GameRegistry, player: Optional[str] = None) -> str:
    """Build the plain text report, players sorted by name"""
    players = registry.snapshot()
    names = [player] if player is not None else list(registry)

    lines = []
    for name in names:
        player_data = players.get(name)
        if player_data is None:
            continue
        lines.extend(format_player(player_data))
    return '\n'.join(lines)


def export_session(session: Session) -> Dict[str, Any]:
    return {
        'start': session.start.isoformat(),
        'stop': session.stop.isoformat(),
        'duration': duration_hhmmss(session.duration),
        'duration_seconds': int(session.duration.total_seconds()),
    }


def export_player(player_data: PlayerData) -> Dict[str, Any]:
    return {
        'name': player_data.name,
        'total_time': duration_hhmmss(player_data.total_time),
        'total_seconds': int(player_data.total_time.total_seconds()),
        'session_count': player_data.session_count,
        'pending': [
            {'action': event.action.value, 'timestamp': event.timestamp.isoformat()}
            for event in player_data.pending_events
        ],
        'days': [
            {
                'date': day.date.isoformat(),
                'total_time': duration_hhmmss(day.total_time),
                'sessions': [export_session(session) for session in day.sessions],
            }
            for day in player_data.days
        ],
    }


def export_registry(registry: GameRegistry) -> Dict[str, Any]:
    players = registry.snapshot()
    return {
        'player_count': len(registry),
        'players': [export_player(players[name]) for name in registry],
    }
