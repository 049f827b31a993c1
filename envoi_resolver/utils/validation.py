"""Validation utilities for the envoi resolver.

This module provides structural checks for Voi account addresses.
"""

import re

from envoi_resolver.constants import ADDRESS_LENGTH
from envoi_resolver.utils.errors import InvalidAddressError

# Voi address pattern (unpadded base32 alphabet)
ADDRESS_PATTERN = re.compile(r"[A-Z2-7]+")


def is_valid_address(address: str) -> bool:
    """Check whether a string is shaped like a Voi address.

    The check is purely structural: no checksum is verified and a valid shape
    says nothing about whether the account exists.

    Args:
        address: The string to check

    Returns:
        True if the string has 58 characters from the base32 alphabet
    """
    if not isinstance(address, str) or len(address) != ADDRESS_LENGTH:
        return False
    return ADDRESS_PATTERN.fullmatch(address) is not None


def validate_address(address: str) -> str:
    """Validate an address and raise an exception if it is malformed.

    Args:
        address: The address to validate

    Returns:
        The address, unchanged

    Raises:
        InvalidAddressError: If the address is not structurally valid
    """
    if not is_valid_address(address):
        raise InvalidAddressError(address)
    return address
