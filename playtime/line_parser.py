#!/usr/bin/env python3
"""
Parser for player connect/disconnect lines in Minecraft server logs.

A line looks like

    [10:00:00] [Server thread/INFO]: Alice joined the game

The header (clock and tag) is parsed first, then the remainder is matched
against the known action phrasings in a fixed order. Log lines only carry a
time of day, so the calendar date is supplied by the caller for every line
of a file.
"""

import re
from datetime import date, datetime, time
from typing import Callable, Optional, Tuple

from .errors import MalformedHeader, MalformedTimestamp, UnrecognizedLine
from .events import PlayerAction, PlayerEvent

BRACKETED = re.compile(r'\[([^\]]*)\]')
CLOCK = re.compile(r'(\d{1,2}):(\d{1,2}):(\d{1,2})')
TAG = re.compile(r' +\[([^\]]+)\]:')
DATE_LIKE = re.compile(r'(\d{4})-(\d{1,2})-(\d{1,2})')

# "Alice joined the game" / "Alice left the game"
CHAT_PATTERN = re.compile(r' +([^ ]+) +(joined|left) the game')

# "UUID of player Alice is 0f1e..." / "Alice lost connection: Disconnected"
UUID_PATTERN = re.compile(r' +UUID of player ([^ ]+) is')
LOST_CONNECTION_PATTERN = re.compile(r' +([^ ]+) lost connection: Disconnected')

ActionMatch = Tuple[str, PlayerAction]


class LogHeader:
    """Clock reading and tag at the start of a log line"""

    __slots__ = ('time_of_day', 'tag', 'rest')

    def __init__(self, time_of_day: time, tag: str, rest: str):
        self.time_of_day = time_of_day
        self.tag = tag
        self.rest = rest

    def __repr__(self):
        return f"LogHeader({self.time_of_day.isoformat()}, {self.tag!r})"


def parse_clock(text: str) -> time:
    """Parse an HH:MM:SS clock reading, padded or not"""
    match = CLOCK.fullmatch(text)
    if not match:
        raise MalformedTimestamp(f"Not a clock reading: '{text}'", text)

    hours, minutes, seconds = (int(part) for part in match.groups())
    try:
        return time(hours, minutes, seconds)
    except ValueError as e:
        raise MalformedTimestamp(f"Clock reading out of range: '{text}' ({e})", text)


def parse_log_header(line: str) -> LogHeader:
    """
    Split `[HH:MM:SS] [tag]:` off the front of a line.
    The tag is kept even though nothing downstream reads it yet.
    """
    clock_match = BRACKETED.match(line)
    if not clock_match:
        raise MalformedHeader("Line does not start with a bracketed clock", line)

    try:
        time_of_day = parse_clock(clock_match.group(1))
    except MalformedTimestamp as e:
        e.line = line
        raise

    tag_match = TAG.match(line, clock_match.end())
    if not tag_match:
        raise MalformedHeader("Missing bracketed tag after clock", line)

    return LogHeader(time_of_day, tag_match.group(1), line[tag_match.end():])


def parse_chat_action(rest: str) -> Optional[ActionMatch]:
    match = CHAT_PATTERN.match(rest)
    if not match:
        return None
    action = PlayerAction.CONNECT if match.group(2) == 'joined' else PlayerAction.DISCONNECT
    return match.group(1), action


def parse_server_action(rest: str) -> Optional[ActionMatch]:
    match = UUID_PATTERN.match(rest)
    if match:
        return match.group(1), PlayerAction.CONNECT

    match = LOST_CONNECTION_PATTERN.match(rest)
    if match:
        return match.group(1), PlayerAction.DISCONNECT
    return None


# Tried in order, first match wins
ACTION_GRAMMARS: Tuple[Callable[[str], Optional[ActionMatch]], ...] = (
    parse_chat_action,
    parse_server_action,
)


def parse_action(rest: str) -> ActionMatch:
    """Match the text after the header against each known phrasing"""
    for grammar in ACTION_GRAMMARS:
        result = grammar(rest)
        if result is not None:
            return result
    raise UnrecognizedLine("No player action phrasing matched", rest)


def parse_event(line: str, log_date: date) -> Tuple[str, PlayerEvent]:
    """
    Parse one raw log line into (player name, event).

    Raises a ParseFailure subclass when the line is not a player
    connect/disconnect line; callers are expected to skip it.
    """
    header = parse_log_header(line)
    try:
        name, action = parse_action(header.rest)
    except UnrecognizedLine as e:
        e.line = line
        raise

    timestamp = datetime.combine(log_date, header.time_of_day)
    return name, PlayerEvent(name, action, timestamp)


def parse_log_date(text: str) -> Optional[date]:
    """Find a YYYY-MM-DD date in a file name like 2022-03-29-1.log.gz"""
    match = DATE_LIKE.search(text)
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None
