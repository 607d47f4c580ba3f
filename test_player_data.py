#!/usr/bin/env python3

from datetime import date, datetime, timedelta

import pytest

from playtime.errors import RejectedSession
from playtime.events import PlayerAction, PlayerEvent
from playtime.player_data import PlayerData, PlayerDay, PlayerState, Session


def connect(when, name="Alice"):
    return PlayerEvent(name, PlayerAction.CONNECT, when)


def disconnect(when, name="Alice"):
    return PlayerEvent(name, PlayerAction.DISCONNECT, when)


def test_session_build_is_plain_difference():
    t1 = datetime(2022, 3, 29, 10, 0, 0)
    t2 = datetime(2022, 3, 29, 10, 30, 0)
    session = Session.build(connect(t1), disconnect(t2))
    assert session.start == t1
    assert session.stop == t2
    assert session.duration == timedelta(minutes=30)
    assert not session.is_negative


def test_session_build_allows_negative_duration():
    session = Session.build(connect(datetime(2022, 3, 29, 11)), disconnect(datetime(2022, 3, 29, 10)))
    assert session.duration == timedelta(hours=-1)
    assert session.is_negative


def test_player_day_rejects_other_dates():
    day = PlayerDay(date(2022, 3, 29))
    day.add_session(Session(datetime(2022, 3, 29, 10), datetime(2022, 3, 29, 11)))

    with pytest.raises(RejectedSession) as excinfo:
        day.add_session(Session(datetime(2022, 3, 30, 10), datetime(2022, 3, 30, 11)))

    assert excinfo.value.bucket_date == date(2022, 3, 29)
    assert len(day) == 1
    assert day.total_time == timedelta(hours=1)


def test_connect_then_disconnect_records_session():
    player = PlayerData("Alice")
    t1 = datetime(2022, 3, 29, 10, 0, 0)
    t2 = datetime(2022, 3, 29, 10, 45, 10)

    player.add_event(connect(t1))
    assert player.state is PlayerState.AWAITING_DISCONNECT

    player.add_event(disconnect(t2))
    assert player.state is PlayerState.IDLE
    assert player.sessions == [Session(t1, t2)]
    assert player.total_time == t2 - t1


def test_new_day_bucket_only_when_date_changes():
    player = PlayerData("Alice")
    player.add_event(connect(datetime(2022, 3, 29, 10)))
    player.add_event(disconnect(datetime(2022, 3, 29, 11)))
    player.add_event(connect(datetime(2022, 3, 29, 12)))
    player.add_event(disconnect(datetime(2022, 3, 29, 12, 30)))
    player.add_event(connect(datetime(2022, 3, 30, 9)))
    player.add_event(disconnect(datetime(2022, 3, 30, 9, 15)))

    assert [day.date for day in player.days] == [date(2022, 3, 29), date(2022, 3, 30)]
    assert [len(day) for day in player.days] == [2, 1]
    assert player.days[0].total_time == timedelta(hours=1, minutes=30)
    assert player.days[1].total_time == timedelta(minutes=15)
    for day in player.days:
        assert all(session.start.date() == day.date for session in day.sessions)
    assert player.total_time == timedelta(hours=1, minutes=45)
    assert player.session_count == 3


def test_unmatched_disconnect_stays_pending():
    player = PlayerData("Alice")
    event = disconnect(datetime(2022, 3, 29, 10))

    player.add_event(event)

    assert player.pending_events == [event]
    assert player.days == []
    assert player.total_time == timedelta(0)


def test_stacked_connects_pair_most_recent_first():
    player = PlayerData("Alice")
    t1 = datetime(2022, 3, 29, 10)
    t2 = datetime(2022, 3, 29, 11)
    t3 = datetime(2022, 3, 29, 11, 20)

    player.add_event(connect(t1))
    player.add_event(connect(t2))
    player.add_event(disconnect(t3))

    assert player.sessions == [Session(t2, t3)]
    assert player.pending_events == [connect(t1)]
    assert player.total_time == timedelta(minutes=20)


def test_trailing_connect_is_not_counted():
    player = PlayerData("Alice")
    player.add_event(connect(datetime(2022, 3, 29, 10)))
    player.add_event(disconnect(datetime(2022, 3, 29, 10, 5)))
    player.add_event(connect(datetime(2022, 3, 29, 23)))

    assert player.total_time == timedelta(minutes=5)
    assert len(player.pending_events) == 1


def test_negative_session_is_counted_and_logged(caplog):
    player = PlayerData("Alice")
    player.add_event(connect(datetime(2022, 3, 29, 12)))
    player.add_event(disconnect(datetime(2022, 3, 29, 11)))

    assert player.total_time == timedelta(hours=-1)
    assert "Negative session for Alice" in caplog.text


def test_events_order_by_timestamp_but_compare_all_fields():
    early = connect(datetime(2022, 3, 29, 10))
    late = disconnect(datetime(2022, 3, 29, 11))
    assert early < late
    assert sorted([late, early]) == [early, late]
    assert connect(datetime(2022, 3, 29, 10)) == early
    assert disconnect(datetime(2022, 3, 29, 10)) != early
    assert connect(datetime(2022, 3, 29, 10), name="Bob") != early


def test_events_with_same_timestamp_are_ordered_both_ways():
    when = datetime(2022, 3, 29, 10)
    alice = connect(when)
    bob = connect(when, name="Bob")

    assert alice != bob
    assert alice <= bob and bob <= alice
    assert alice >= bob and bob >= alice
    assert not alice < bob and not alice > bob
    assert disconnect(datetime(2022, 3, 29, 11)) > alice
