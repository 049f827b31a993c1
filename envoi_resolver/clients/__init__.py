"""Resolver clients for the envoi naming service.

This package provides the chain-backed and HTTP-backed resolvers. Both expose
``resolve_name`` and ``resolve_address`` for single lookups; choosing between
them is left to the caller.
"""

from typing import Protocol

from envoi_resolver.clients.chain_resolver import ChainResolver
from envoi_resolver.clients.contract_client import ContractClient, create_algod_client
from envoi_resolver.clients.http_resolver import HttpResolver


class NameResolver(Protocol):
    """Capabilities shared by both resolvers."""

    async def resolve_name(self, address: str) -> str:
        ...

    async def resolve_address(self, name: str) -> str:
        ...


__all__ = [
    'ChainResolver',
    'ContractClient',
    'HttpResolver',
    'NameResolver',
    'create_algod_client',
]
