import time
from datetime import UTC, datetime
from uuid import uuid4


def now() -> datetime:
    return datetime.now(UTC)


def unix_now() -> int:
    """Current time in whole seconds since the epoch."""
    return int(time.time())


def unix_now_ms() -> int:
    return int(time.time() * 1000)


def generate_session_id() -> str:
    """Random UUID4 string, 122 bits of entropy from the OS CSPRNG."""
    return str(uuid4())


def iso_now() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2026-10-19T08:30:00.000Z."""
    return now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def display_month() -> str:
    """Human-readable month stamp shown on articles, e.g. 'October 2026'."""
    return now().strftime("%B %Y")
