"""Human-typeable transaction reference codes (``PS-MGX1A2B3-K9Q2``).

Codes are unique with overwhelming probability only: a millisecond
timestamp plus four random base36 characters. ``parking_entries`` carries a
unique index on the code and entry creation regenerates on a collision.
"""

import secrets
import string
import time

BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LEN = 4


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding needs a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_reference_code(prefix: str = "PS", now_ms: int | None = None) -> str:
    """Build a new code. ``now_ms`` defaults to the current epoch millis."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(SUFFIX_LEN))
    return f"{prefix}-{to_base36(now_ms)}-{suffix}"
