"""
Multiplicative cipher core.

    E(x) = (x * k) mod 26
    D(y) = (y * k_inv) mod 26,  k_inv = k^-1 mod 26

Upper- and lowercase letters keep their case; every other character
(digits, spaces, punctuation, non-Latin letters) is copied unchanged.
Each character also produces a Step so the arithmetic can be shown.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .arithmetic import ALPHABET_SIZE, letter_value, mod_inverse, value_letter
from .keys import require_valid_key


class Direction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass(frozen=True)
class Step:
    original_char: str
    result_char: str
    skipped: bool
    letter_value: Optional[int] = None
    effective_key: Optional[int] = None
    result_value: Optional[int] = None
    inverse: bool = False

    def describe(self) -> str:
        """Calculation text, e.g. '7 × 5' or '9 × 21 (inv)'."""
        if self.skipped:
            return "skip"
        calc = f"{self.letter_value} × {self.effective_key}"
        return calc + " (inv)" if self.inverse else calc


@dataclass(frozen=True)
class TransformResult:
    text: str
    output: str
    key: int
    effective_key: int
    direction: Direction
    steps: List[Step] = field(default_factory=list)

    @property
    def used_letters(self) -> set:
        """Lowercase letters that occurred in the input text."""
        return {s.original_char.lower() for s in self.steps if not s.skipped}


def is_latin_letter(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z')


def effective_key_for(key: int, direction: Direction) -> int:
    if direction is Direction.DECRYPT:
        return mod_inverse(key, ALPHABET_SIZE)
    return key


def transform(text: str, key, direction: Direction = Direction.ENCRYPT) -> TransformResult:
    """
    Encrypt or decrypt `text` with the multiplicative key `key`.
    Raises InvalidKeyError (a ValueError) if the key is not usable.
    """
    key = require_valid_key(key)
    direction = Direction(direction)
    e = effective_key_for(key, direction)
    inverse = direction is Direction.DECRYPT

    out = []
    steps = []
    for ch in text:
        if is_latin_letter(ch):
            x = letter_value(ch)
            y = (x * e) % ALPHABET_SIZE
            new_ch = value_letter(y)
            if ch.isupper():
                new_ch = new_ch.upper()
            out.append(new_ch)
            steps.append(Step(ch, new_ch, False, x, e, y, inverse))
        else:
            out.append(ch)
            steps.append(Step(ch, ch, True))

    return TransformResult(text=text, output=''.join(out), key=key,
                           effective_key=e, direction=direction, steps=steps)


def encrypt(text: str, key) -> str:
    return transform(text, key, Direction.ENCRYPT).output


def decrypt(text: str, key) -> str:
    return transform(text, key, Direction.DECRYPT).output
