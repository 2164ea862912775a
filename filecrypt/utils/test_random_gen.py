import pytest

from filecrypt.utils.random_gen import SecureRandom


def test_lengths():
    assert len(SecureRandom.generate_bytes(0)) == 0
    assert len(SecureRandom.generate_bytes(7)) == 7
    assert len(SecureRandom.generate_iv()) == 16
    assert len(SecureRandom.generate_key()) == 32
    assert len(SecureRandom.generate_key(24)) == 24


def test_unique():
    assert SecureRandom.generate_key() != SecureRandom.generate_key()


def test_negative_length():
    with pytest.raises(ValueError):
        SecureRandom.generate_bytes(-1)


def test_only_byte_generators_exposed():
    assert not hasattr(SecureRandom, "generate_token")
