"""
Key validation for the multiplicative cipher.

A key k is usable when 1 <= k <= 25 and gcd(k, 26) = 1, i.e. one of
1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25.
"""
import numbers
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .arithmetic import ALPHABET_SIZE, gcd, valid_keys

MIN_KEY = 1
MAX_KEY = ALPHABET_SIZE - 1


class KeyStatus(Enum):
    VALID = "valid"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    NOT_COPRIME = "not_coprime"


@dataclass(frozen=True)
class KeyCheck:
    """Outcome of validate_key(). reason is the message shown to the user."""
    status: KeyStatus
    key: Optional[int] = None
    reason: Optional[str] = None
    suggestions: tuple = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status is KeyStatus.VALID


class InvalidKeyError(ValueError):
    """Raised when an unusable key reaches the cipher."""

    def __init__(self, check: KeyCheck):
        super().__init__(check.reason)
        self.check = check


def parse_key(raw_key) -> Optional[int]:
    """
    Turn user input into an int, or None when it is not a whole number.
    Accepts any integer type (numpy ints included), integral floats and
    strings such as " 7 " or "7.0".
    """
    if isinstance(raw_key, bool):
        return None
    if isinstance(raw_key, numbers.Integral):
        return operator.index(raw_key)
    if isinstance(raw_key, float):
        return int(raw_key) if raw_key.is_integer() else None
    if isinstance(raw_key, str):
        s = raw_key.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            value = float(s)
        except ValueError:
            return None
        return int(value) if value.is_integer() else None
    return None


def nearest_valid_keys(key: int, count: int = 2) -> tuple:
    """The `count` valid keys closest to `key` (ties go to the smaller one)."""
    ranked = sorted(valid_keys(), key=lambda k: (abs(k - key), k))
    return tuple(sorted(ranked[:count]))


def validate_key(raw_key) -> KeyCheck:
    k = parse_key(raw_key)
    if k is None:
        return KeyCheck(KeyStatus.NOT_A_NUMBER, reason="Key must be a number")
    if k < MIN_KEY or k > MAX_KEY:
        return KeyCheck(KeyStatus.OUT_OF_RANGE, key=k,
                        reason=f"Key must be between {MIN_KEY} and {MAX_KEY}")
    g = gcd(k, ALPHABET_SIZE)
    if g != 1:
        alternatives = nearest_valid_keys(k)
        hint = ", ".join(str(a) for a in alternatives)
        return KeyCheck(KeyStatus.NOT_COPRIME, key=k,
                        reason=f"Key {k} is not coprime to {ALPHABET_SIZE} (gcd = {g}). Try {hint}...",
                        suggestions=alternatives)
    return KeyCheck(KeyStatus.VALID, key=k)


def require_valid_key(raw_key) -> int:
    """Return the parsed key or raise InvalidKeyError."""
    check = validate_key(raw_key)
    if not check.ok:
        raise InvalidKeyError(check)
    return check.key
