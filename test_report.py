#!/usr/bin/env python3

from datetime import datetime, timedelta

from playtime.player_data import PlayerData
from playtime.events import PlayerAction, PlayerEvent
from playtime.report import duration_hhmmss, export_player


def test_duration_formatting():
    assert duration_hhmmss(timedelta(seconds=3725)) == "01:02:05"
    assert duration_hhmmss(timedelta(0)) == "00:00:00"


def test_duration_hours_are_not_wrapped():
    assert duration_hhmmss(timedelta(days=1, hours=3, seconds=1)) == "27:00:01"
    assert duration_hhmmss(timedelta(hours=123)) == "123:00:00"


def test_negative_duration_keeps_sign():
    assert duration_hhmmss(timedelta(minutes=-5)) == "-00:05:00"


def test_export_player_lists_days_and_pending():
    player = PlayerData("Alice")
    player.add_event(PlayerEvent("Alice", PlayerAction.CONNECT, datetime(2022, 3, 29, 10)))
    player.add_event(PlayerEvent("Alice", PlayerAction.DISCONNECT, datetime(2022, 3, 29, 10, 30)))
    player.add_event(PlayerEvent("Alice", PlayerAction.CONNECT, datetime(2022, 3, 29, 22)))

    exported = export_player(player)

    assert exported['total_time'] == "00:30:00"
    assert exported['total_seconds'] == 1800
    assert exported['session_count'] == 1
    assert exported['pending'] == [{'action': 'connect', 'timestamp': '2022-03-29T22:00:00'}]
    assert exported['days'] == [{
        'date': '2022-03-29',
        'total_time': '00:30:00',
        'sessions': [{
            'start': '2022-03-29T10:00:00',
            'stop': '2022-03-29T10:30:00',
            'duration': '00:30:00',
            'duration_seconds': 1800,
        }],
    }]
