from multiplicative_cipher.cipher import Direction
from multiplicative_cipher.keys import KeyStatus
from multiplicative_cipher.session import Session


def test_encrypt_transfers_to_decrypt_panel():
    s = Session()
    enc = s.encrypt("Hello, World", "5")
    assert enc.output == "Judds, Gshdp"
    assert s.encrypt_panel.output == enc.output
    assert s.decrypt_panel.text == enc.output
    assert s.decrypt_panel.key == "5"
    assert s.decrypt_panel.output == ""
    assert s.last_result is enc

    dec = s.decrypt()
    assert dec.direction is Direction.DECRYPT
    assert dec.output == "Hello, World"
    assert s.round_trip_ok()
    assert len(s.last_mapping) == 26


def test_invalid_key_blocks_run():
    s = Session()
    assert s.encrypt("hello", 13) is None
    assert not s.encrypt_panel.can_run
    assert s.encrypt_panel.check.status is KeyStatus.NOT_COPRIME
    assert s.decrypt_panel.text == ""
    assert s.last_result is None


def test_decrypt_without_key_does_nothing():
    assert Session().decrypt("judds") is None


def test_decrypt_with_override():
    s = Session()
    s.encrypt("abc", 3)
    dec = s.decrypt("judds", 5)
    assert dec.output == "hello"
    assert s.decrypt_panel.key == "5"


def test_rejected_decrypt_clears_previous_output():
    s = Session()
    s.encrypt("hello", 5)
    s.decrypt()
    assert s.round_trip_ok()
    assert s.decrypt("xyz", 13) is None
    assert s.decrypt_panel.text == "xyz"
    assert s.decrypt_panel.output == ""
    assert not s.round_trip_ok()


def test_rejected_encrypt_leaves_decrypt_panel():
    s = Session()
    s.encrypt("abc", 3)
    before = (s.decrypt_panel.text, s.decrypt_panel.key)
    assert s.encrypt("hello", 4) is None
    assert s.encrypt_panel.output == ""
    assert (s.decrypt_panel.text, s.decrypt_panel.key) == before
