# Text rendering of a transform: overview banner, key summary, step cards.

from typing import List

from .arithmetic import ALPHABET_SIZE
from .cipher import Direction, Step, TransformResult
from .mapping import format_mapping_table, mapping_for

# ==============================
# Overview banner
# ==============================

OVERVIEW = r"""
================================================================================
Multiplicative Cipher - Algorithm Overview (TEACHING MODE)
================================================================================

Letters are numbered A=0, B=1, ..., Z=25.

Key k must satisfy 1 <= k <= 25 and gcd(k, 26) = 1, otherwise two letters
would map to the same cipher letter and decryption would be impossible.
Valid keys: 1 3 5 7 9 11 15 17 19 21 23 25

Encryption:   y = (x * k) mod 26
Decryption:   x = (y * k_inv) mod 26   where (k * k_inv) mod 26 = 1

Case is preserved; digits, spaces and punctuation are copied unchanged.
This cipher is for lecture/demo only.
================================================================================
"""


def print_overview():
    print(OVERVIEW)


def maybe_pause(do_pause: bool, msg="(press Enter)"):
    if do_pause:
        try:
            input(msg)
        except EOFError:
            pass


# ==============================
# Step cards
# ==============================

def format_step(step: Step) -> str:
    if step.skipped:
        return f"  '{step.original_char}'   -   skip            -> '{step.result_char}'"
    return (f"  '{step.original_char}'  {step.letter_value:2d}   "
            f"{step.describe():<14} = {step.result_value:2d} -> '{step.result_char}'")


def format_steps(steps: List[Step], limit: int = 0) -> str:
    """One line per step; limit > 0 truncates the listing."""
    shown = steps[:limit] if limit > 0 else steps
    lines = [format_step(s) for s in shown]
    if len(shown) < len(steps):
        lines.append(f"  ... ({len(steps) - len(shown)} more)")
    return "\n".join(lines)


def format_inverse_search(key: int) -> str:
    """The brute-force inverse search written out: k * x mod 26 for each x."""
    lines = []
    for x in range(1, ALPHABET_SIZE):
        r = (key * x) % ALPHABET_SIZE
        lines.append(f"  {key} × {x:2d} mod {ALPHABET_SIZE} = {r:2d}" + ("   <-- inverse" if r == 1 else ""))
        if r == 1:
            break
    return "\n".join(lines)


def report(result: TransformResult, verbose: int = 0, step_limit: int = 0):
    """
    Print a transform the way the lecture walks through it.
      0 = output only
      1 = + key summary and alphabet mapping
      2 = + per-character steps
      3 = + inverse search (decryption)
    """
    label = "Decrypted" if result.direction is Direction.DECRYPT else "Encrypted"
    if verbose >= 1:
        print(f"[KEY] k = {result.key}")
        if result.direction is Direction.DECRYPT:
            print(f"[INV] k_inv = {result.effective_key}  "
                  f"({result.key} × {result.effective_key} mod {ALPHABET_SIZE} = 1)")
            if verbose >= 3:
                print(format_inverse_search(result.key))
        print(f"[KEY] effective multiplier = {result.effective_key}")
    if verbose >= 2:
        print("[STEP] char  x   calc             y    out")
        print(format_steps(result.steps, step_limit))
    if verbose >= 1:
        print("[MAP] plain -> cipher (^ = letter used in the input)")
        print(format_mapping_table(mapping_for(result)))
        print()
    print(f"{label} text:")
    print(result.output)
