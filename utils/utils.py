import time
from datetime import datetime, timezone


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='microseconds')


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def make_id(prefix: str) -> str:
    """Id for a record the hosted store never saw, e.g. 'card-1718000000000'."""
    return f"{prefix}-{now_millis()}"


def make_local_id(prefix: str) -> str:
    """Id for a record created while offline, e.g. 'set-local-1718000000000'."""
    return f"{prefix}-local-{now_millis()}"


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 encoding needs a non-negative number")

    digits = '0123456789abcdefghijklmnopqrstuvwxyz'
    if number == 0:
        return '0'

    out = []
    while number:
        number, rem = divmod(number, 36)
        out.append(digits[rem])
    return ''.join(reversed(out))
