import string

import pytest

from multiplicative_cipher.cipher import Direction, decrypt, encrypt, transform
from multiplicative_cipher.keys import InvalidKeyError

VALID = [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]
SAMPLE = "Attack at Dawn! 0123 The quick brown fox, jumps over the lazy dog. Ünïcode ok?"


def test_known_vector():
    assert encrypt("hello", 5) == "judds"
    assert decrypt("judds", 5) == "hello"


@pytest.mark.parametrize("k", VALID)
def test_round_trip(k):
    ct = transform(SAMPLE, k, Direction.ENCRYPT).output
    assert transform(ct, k, Direction.DECRYPT).output == SAMPLE


def test_identity_key():
    assert encrypt(SAMPLE, 1) == SAMPLE


def test_case_and_pass_through():
    out = encrypt("Attack at Dawn!", 5)
    assert out == "Arraky ar Pagn!"
    for a, b in zip("Attack at Dawn!", out):
        assert a.isupper() == b.isupper()
        if not a.isalpha():
            assert a == b


def test_effective_key():
    assert transform("x", 5, Direction.ENCRYPT).effective_key == 5
    assert transform("x", 5, Direction.DECRYPT).effective_key == 21
    assert transform("x", 5, "decrypt").direction is Direction.DECRYPT


def test_steps():
    result = transform("Hi!", 5)
    assert len(result.steps) == 3
    h, i, bang = result.steps
    assert (h.letter_value, h.effective_key, h.result_value, h.result_char) == (7, 5, 9, "J")
    assert not h.skipped
    assert h.describe() == "7 × 5"
    assert bang.skipped
    assert bang.letter_value is None and bang.result_value is None
    assert bang.result_char == "!"
    assert bang.describe() == "skip"


def test_decrypt_step_marks_inverse():
    step = transform("j", 5, Direction.DECRYPT).steps[0]
    assert step.describe() == "9 × 21 (inv)"
    assert step.result_char == "h"


def test_used_letters_ignore_non_letters():
    result = transform("Hello, World 42", 3)
    assert result.used_letters == {"h", "e", "l", "o", "w", "r", "d"}


def test_empty_and_letterless_text():
    empty = transform("", 7)
    assert empty.output == ""
    assert empty.steps == []
    digits = transform("123 -- ?!", 7)
    assert digits.output == "123 -- ?!"
    assert all(s.skipped for s in digits.steps)


def test_non_ascii_letters_pass_through():
    assert encrypt("éß", 3) == "éß"


def test_deterministic():
    assert transform(SAMPLE, 11) == transform(SAMPLE, 11)


@pytest.mark.parametrize("bad", [0, 2, 13, 26, -1, "abc"])
def test_invalid_key_rejected(bad):
    with pytest.raises(InvalidKeyError):
        transform("hello", bad)


def test_every_letter_is_a_permutation():
    for k in VALID:
        assert sorted(encrypt(string.ascii_lowercase, k)) == list(string.ascii_lowercase)
