"""enVoi resolver package.

This package resolves Voi naming service names to addresses and back, either
directly against the naming contracts or through the enVoi indexing API.
"""

from envoi_resolver.clients import ChainResolver, HttpResolver, NameResolver
from envoi_resolver.config import AlgodConfig, ResolverSettings
from envoi_resolver.models import NameRecord, TokenRecord
from envoi_resolver.namehash import namehash
from envoi_resolver.sdk import EnvoiSDK, init
from envoi_resolver.utils import (
    EnvoiError,
    bytes_to_uint,
    is_valid_address,
    uint_to_bytes,
)

__version__ = "0.1.0"
__author__ = "enVoi"

__all__ = [
    'AlgodConfig',
    'ChainResolver',
    'EnvoiError',
    'EnvoiSDK',
    'HttpResolver',
    'NameRecord',
    'NameResolver',
    'ResolverSettings',
    'TokenRecord',
    'bytes_to_uint',
    'init',
    'is_valid_address',
    'namehash',
    'uint_to_bytes',
]
