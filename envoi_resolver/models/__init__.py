"""Data models for the envoi resolver."""

from envoi_resolver.models.records import (
    ContractResponse,
    NameRecord,
    ResolutionResult,
    ResolverResponse,
    TokenRecord,
)

__all__ = [
    'ContractResponse',
    'NameRecord',
    'ResolutionResult',
    'ResolverResponse',
    'TokenRecord',
]
