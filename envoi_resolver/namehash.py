"""Canonical name hashing for the Voi naming service.

A name such as ``en.voi`` is hashed label by label, starting from the
root-most label, into a 32-byte node hash. The node hash is the storage key the
naming contracts use, so the primitive (SHA-256) and the byte order must not
change.
"""

import binascii
import hashlib

from algosdk import encoding
from algosdk.error import WrongChecksumError, WrongKeyLengthError

from envoi_resolver.constants import NODE_HASH_SIZE, REVERSE_SUFFIX
from envoi_resolver.utils.errors import InvalidAddressError
from envoi_resolver.utils.validation import is_valid_address

EMPTY_NODE = bytes(NODE_HASH_SIZE)


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def label_hash(label: str) -> bytes:
    """Hash a single label.

    Labels shaped like an address are hashed over the address's raw public
    key instead of its text, which is how reverse records were written.

    Args:
        label: One dot-separated segment of a name

    Returns:
        The 32-byte label digest

    Raises:
        InvalidAddressError: If the label looks like an address but does not
            decode to a public key
    """
    if is_valid_address(label):
        try:
            return sha256(encoding.decode_address(label))
        except WrongChecksumError:
            raise InvalidAddressError(label, reason="checksum mismatch")
        except (WrongKeyLengthError, binascii.Error) as e:
            raise InvalidAddressError(label, reason=f"undecodable: {e}") from e
    return sha256(label.encode("utf-8"))


def namehash(name: str) -> bytes:
    """Compute the node hash of a dotted name.

    Args:
        name: Name in human order, leaf label first (e.g. ``en.voi``)

    Returns:
        The 32-byte node hash; an empty name hashes to 32 zero bytes
    """
    node = EMPTY_NODE
    if not name:
        return node

    for label in reversed(name.split(".")):
        # Empty labels from stray dots leave the node untouched
        if not label:
            continue
        node = sha256(node + label_hash(label))

    return node


def reverse_name(address: str) -> str:
    """Build the pseudo-name under which an address's reverse record lives."""
    return f"{address}.{REVERSE_SUFFIX}"
