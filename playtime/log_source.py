import os
import re
import glob
import gzip
import logging
import zlib
from datetime import date, datetime
from typing import Iterator, List, Sequence, Tuple

from .errors import LogSourceError
from .line_parser import parse_log_date

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ('*.log.gz', '*.log')

# Rotation index in names like 2022-03-29-3.log.gz
ROTATION_INDEX = re.compile(r'\d{4}-\d{1,2}-\d{1,2}-(\d+)\.log')


def resolve_log_date(path: str) -> date:
    """
    Date that applies to every line of a log file.
    File name first (YYYY-MM-DD), then the file's creation time.
    """
    log_date = parse_log_date(os.path.basename(path))
    if log_date is not None:
        return log_date

    try:
        stat = os.stat(path)
    except OSError as e:
        raise LogSourceError(f"Cannot determine date for {path}: {e}", path)

    # st_birthtime only exists on some platforms; st_ctime is the closest fallback
    created = getattr(stat, 'st_birthtime', None) or stat.st_ctime
    if not created:
        raise LogSourceError(f"Cannot determine date for {path}: no creation time", path)

    logger.debug(f"No date in file name {os.path.basename(path)}, using creation time")
    return datetime.fromtimestamp(created).date()


def _sort_key(path: str) -> Tuple[date, int, int, str]:
    filename = os.path.basename(path)
    # Undated files (latest.log) are still being written, so they follow
    # the rotated files of the same day
    if parse_log_date(filename) is None:
        return resolve_log_date(path), 1, 0, filename

    match = ROTATION_INDEX.search(filename)
    rotation = int(match.group(1)) if match else 0
    return resolve_log_date(path), 0, rotation, filename


def find_log_files(log_dir: str, patterns: Sequence[str] = DEFAULT_PATTERNS) -> List[str]:
    """Get all log files matching the patterns in chronological order"""
    if not os.path.isdir(log_dir):
        raise LogSourceError(f"Log directory does not exist: {log_dir}", log_dir)

    log_files = set()
    for pattern in patterns:
        for path in glob.glob(os.path.join(log_dir, pattern)):
            if os.path.isfile(path):
                log_files.add(path)

    return sorted(log_files, key=_sort_key)


def read_log_lines(path: str) -> Iterator[str]:
    """Yield decoded lines of a plain or gzip-compressed log file"""
    try:
        if path.endswith('.gz'):
            f = gzip.open(path, 'rt', encoding='utf-8', errors='ignore')
        else:
            f = open(path, 'r', encoding='utf-8', errors='ignore')
    except OSError as e:
        raise LogSourceError(f"Failed to open {path}: {e}", path)

    with f:
        try:
            for line in f:
                yield line.rstrip('\r\n')
        except (OSError, EOFError, zlib.error) as e:
            raise LogSourceError(f"Failed to read {path}: {e}", path)
