"""Utility modules for the envoi resolver."""

from envoi_resolver.utils.encoding import (
    bytes_to_uint,
    decode_fixed_string,
    strip_null_bytes,
    uint_to_bytes,
)
from envoi_resolver.utils.errors import (
    ConfigurationError,
    ContractCallError,
    EncodingError,
    EnvoiError,
    ErrorCode,
    InvalidAddressError,
)
from envoi_resolver.utils.validation import is_valid_address, validate_address

__all__ = [
    'bytes_to_uint',
    'decode_fixed_string',
    'strip_null_bytes',
    'uint_to_bytes',
    'ConfigurationError',
    'ContractCallError',
    'EncodingError',
    'EnvoiError',
    'ErrorCode',
    'InvalidAddressError',
    'is_valid_address',
    'validate_address',
]
