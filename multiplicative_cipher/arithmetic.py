import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)  # 26


def gcd(a: int, b: int) -> int:
    """
    Euclid's algorithm. gcd(a, 0) = a.
    """
    while b:
        a, b = b, a % b
    return a


def mod_inverse(a: int, m: int = ALPHABET_SIZE):
    """
    Computes the modular inverse of a modulo m using a simple brute-force approach.
    a is first normalised into [0, m-1], so negative values are fine.
    Returns the inverse x in [1, m-1] with (a * x) mod m == 1, else None.

    The linear search only makes sense because m is the fixed alphabet size.
    A configurable alphabet would need mod_inverse_egcd() instead.
    """
    a = ((a % m) + m) % m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Return (g, x, y) such that a*x + b*y = g = gcd(a, b).
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def mod_inverse_egcd(a: int, m: int = ALPHABET_SIZE) -> int:
    """Modular inverse via the extended Euclidean algorithm (any modulus)."""
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m} (gcd = {g}).")
    return x % m


def valid_keys(m: int = ALPHABET_SIZE) -> list[int]:
    """All multipliers in [1, m-1] that are coprime with m."""
    return [k for k in range(1, m) if gcd(k, m) == 1]


def letter_value(ch: str) -> int:
    """A/a -> 0 ... Z/z -> 25."""
    return ord(ch.lower()) - ord('a')


def value_letter(n: int) -> str:
    """0 -> 'a' ... 25 -> 'z'."""
    return ALPHABET[n]
