"""Identifier and timestamp helpers shared by the domain services."""
from __future__ import annotations
import random
import string
import time
from datetime import datetime, timezone

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 encoding needs a non-negative integer")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_id(prefix: str) -> str:
    """
    prefix + "-" + base36(epoch millis) + 4 random base36 chars.
    Roughly chronological, not collision-proof.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=4))
    return f"{prefix}-{to_base36(millis)}{suffix}"


def now_iso() -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-05-01T09:30:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
