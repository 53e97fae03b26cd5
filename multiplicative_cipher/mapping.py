"""
Full alphabet mapping for an effective key: i -> (i * e) mod 26.

Built with numpy on its own, without calling into cipher.transform(), so the
table can be checked against the transform letter by letter.
"""
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .arithmetic import ALPHABET, ALPHABET_SIZE


@dataclass(frozen=True)
class MappingEntry:
    plain_index: int
    plain_letter: str
    cipher_index: int
    cipher_letter: str
    is_highlighted: bool = False


def cipher_indices(effective_key: int) -> np.ndarray:
    """Vector of (i * e) mod 26 for i = 0..25."""
    return (np.arange(ALPHABET_SIZE, dtype=np.int64) * effective_key) % ALPHABET_SIZE


def build_mapping(effective_key: int, occurred_letters: Iterable[str] = ()) -> List[MappingEntry]:
    """
    Returns 26 entries in plain-letter order. is_highlighted marks letters
    present in `occurred_letters` (compared case-insensitively).
    """
    used = {c.lower() for c in occurred_letters}
    entries = []
    for i, ci in enumerate(cipher_indices(effective_key).tolist()):
        plain = ALPHABET[i]
        entries.append(MappingEntry(i, plain, ci, ALPHABET[ci], plain in used))
    return entries


def mapping_for(result) -> List[MappingEntry]:
    """Mapping shown after a transform: its effective key, its input letters."""
    return build_mapping(result.effective_key, result.used_letters)


def format_mapping_table(entries: List[MappingEntry]) -> str:
    """
    Three rows like

     A  B  C  D ...
     --+--+--+-- ...
     A  F  K  P ...
     ^        ^

    The last row marks letters that occurred in the processed text.
    """
    row1 = " ".join(f"{e.plain_letter.upper():2}" for e in entries)
    row2 = " " + "--" + "+--" * (len(entries) - 1) + " "
    row3 = " ".join(f"{e.cipher_letter.upper():2}" for e in entries)
    row4 = " ".join(f"{'^' if e.is_highlighted else '':2}" for e in entries)
    return "\n".join([row1, row2, row3, row4.rstrip()])
