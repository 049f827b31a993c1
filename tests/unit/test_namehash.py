"""Unit tests for name hashing."""

import binascii
import hashlib
from unittest.mock import patch

import pytest
from algosdk import encoding
from algosdk.error import WrongKeyLengthError

from envoi_resolver.namehash import label_hash, namehash, reverse_name
from envoi_resolver.utils.encoding import bytes_to_uint
from envoi_resolver.utils.errors import InvalidAddressError

TEST_ADDRESS = "BRB3JP4LIW5Q755FJCGVAOA4W3THJ7BR3K6F26EVCGMETLEAZOQRHHJNLQ"

EN_VOI_HASH = "391bbd21b5e7aaf42aac4b4cdacb692b37a1ed69050555622b8eb294b5ba444a"
VOI_HASH = "b450c7e69b509b3d8c47d59c1cf8f6b141fe78244c5fd37df696a8bda7b0d541"
REVERSE_HASH = "993d79462a767633575caeff2a25e5ed1e9394996de0b1353fd39f1d64bf6dde"


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def test_empty_name_is_zero():
    assert namehash("") == bytes(32)


def test_known_vectors():
    assert namehash("voi").hex() == VOI_HASH
    assert namehash("en.voi").hex() == EN_VOI_HASH


def test_reverse_record_vector():
    assert namehash(reverse_name(TEST_ADDRESS)).hex() == REVERSE_HASH


def test_folding_order():
    """The root-most label is folded in first."""
    voi = _sha256(bytes(32) + _sha256(b"voi"))
    expected = _sha256(voi + _sha256(b"en"))
    assert namehash("en.voi") == expected
    assert namehash("voi.en") != expected


def test_deterministic_and_fixed_size():
    for name in ("en.voi", "a.b.c.d", "x"):
        assert namehash(name) == namehash(name)
        assert len(namehash(name)) == 32


def test_empty_labels_are_skipped():
    assert namehash("en..voi") == namehash("en.voi")
    assert namehash(".en.voi.") == namehash("en.voi")
    assert namehash("...") == bytes(32)


def test_case_sensitive():
    assert namehash("EN.voi") != namehash("en.voi")


def test_utf8_labels():
    assert namehash("café.voi") == _sha256(namehash("voi") + _sha256("café".encode("utf-8")))


def test_address_label_hashes_public_key():
    public_key = encoding.decode_address(TEST_ADDRESS)
    assert label_hash(TEST_ADDRESS) == _sha256(public_key)
    assert label_hash(TEST_ADDRESS) != _sha256(TEST_ADDRESS.encode())


def test_address_label_with_bad_checksum():
    with pytest.raises(InvalidAddressError):
        namehash(reverse_name(TEST_ADDRESS[:-1] + "A"))


@pytest.mark.parametrize("decode_error", [
    binascii.Error("Non-base32 digit found"),
    WrongKeyLengthError(),
])
def test_address_label_that_does_not_decode(decode_error):
    with patch("envoi_resolver.namehash.encoding.decode_address", side_effect=decode_error):
        with pytest.raises(InvalidAddressError) as exc_info:
            label_hash(TEST_ADDRESS)
    assert exc_info.value.address == TEST_ADDRESS
    assert "undecodable" in str(exc_info.value)


def test_newline_suffixed_label_is_hashed_as_text():
    label = "A" * 57 + "\n"
    assert label_hash(label) == _sha256(label.encode("utf-8"))


def test_reverse_name():
    assert reverse_name(TEST_ADDRESS) == f"{TEST_ADDRESS}.addr.reverse"


def test_token_key():
    assert bytes_to_uint(namehash("en.voi")) == int(EN_VOI_HASH, 16)
