"""
Exception types for log parsing and session reconstruction.

Parse failures are never fatal: callers catch ParseFailure and skip the line.
Only LogSourceError aborts a run.
"""

from datetime import date


class ParseFailure(ValueError):
    """A log line could not be turned into a player event"""

    def __init__(self, message: str, line: str = ''):
        super().__init__(message)
        self.line = line


class MalformedHeader(ParseFailure):
    """Line does not start with `[clock] [tag]:`"""


class MalformedTimestamp(ParseFailure):
    """Bracketed clock is not a valid HH:MM:SS reading"""


class UnrecognizedLine(ParseFailure):
    """Header is fine but no connect/disconnect phrasing matched"""


class RejectedSession(ValueError):
    """Session start date does not belong to the day bucket"""

    def __init__(self, session, bucket_date: date):
        super().__init__(
            f"Session starting {session.start} does not belong to day {bucket_date}"
        )
        self.session = session
        self.bucket_date = bucket_date


class LogSourceError(RuntimeError):
    """A log file could not be read or dated"""

    def __init__(self, message: str, path: str = ''):
        super().__init__(message)
        self.path = path
