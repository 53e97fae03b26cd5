import pytest

from multiplicative_cipher.arithmetic import (
    extended_gcd, gcd, letter_value, mod_inverse, mod_inverse_egcd, valid_keys, value_letter,
)

VALID = [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]


@pytest.mark.parametrize("a,b,expected", [(26, 4, 2), (5, 26, 1), (13, 26, 13), (7, 0, 7), (0, 9, 9), (270, 192, 6)])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


def test_valid_keys():
    assert valid_keys() == VALID
    assert len(valid_keys()) == 12


@pytest.mark.parametrize("k", VALID)
def test_mod_inverse(k):
    inv = mod_inverse(k, 26)
    assert 1 <= inv <= 25
    assert (k * inv) % 26 == 1


def test_mod_inverse_known_values():
    assert mod_inverse(5, 26) == 21
    assert mod_inverse(3, 26) == 9
    assert mod_inverse(25, 26) == 25


def test_mod_inverse_normalises_negative_and_large():
    assert mod_inverse(-21, 26) == mod_inverse(5, 26)
    assert mod_inverse(31, 26) == 21


def test_mod_inverse_none_when_not_coprime():
    assert mod_inverse(13, 26) is None
    assert mod_inverse(2, 26) is None


@pytest.mark.parametrize("k", VALID)
def test_brute_force_and_egcd_agree(k):
    assert mod_inverse_egcd(k, 26) == mod_inverse(k, 26)


def test_egcd_other_moduli():
    g, x, y = extended_gcd(240, 46)
    assert g == 2
    assert 240 * x + 46 * y == 2
    assert (17 * mod_inverse_egcd(17, 3120)) % 3120 == 1
    with pytest.raises(ValueError):
        mod_inverse_egcd(4, 26)


def test_letter_values():
    assert letter_value("a") == 0
    assert letter_value("Z") == 25
    assert value_letter(9) == "j"
