"""
Share codes: an opaque string a user can hand to someone else to import a set.

Format: FL-<set_id>-<base36 millis>

Decoding takes everything between 'FL-' and the next hyphen, so a set id that
itself contains a hyphen comes back truncated. Server-assigned ids are uuid4
hex (no hyphens) for this reason.
"""

import re

from utils.constants import SHARE_CODE_PREFIX
from utils.utils import now_millis, to_base36

_CODE_RE = re.compile(rf'{SHARE_CODE_PREFIX}-(.*?)-')


class InvalidCodeError(ValueError):
    """Raised when a share code does not carry a set id."""


def encode(set_id: str, millis: int | None = None) -> str:
    if millis is None:
        millis = now_millis()
    return f"{SHARE_CODE_PREFIX}-{set_id}-{to_base36(millis)}"


def decode(code: str) -> str:
    match = _CODE_RE.search(code or '')
    if not match or not match.group(1):
        raise InvalidCodeError('Invalid share code')
    return match.group(1)
