"""Entry point composing the chain and HTTP resolvers."""

from typing import Optional

from envoi_resolver.clients.chain_resolver import ChainResolver
from envoi_resolver.clients.http_resolver import HttpResolver
from envoi_resolver.config import AlgodConfig, ResolverSettings, get_resolver_settings
from envoi_resolver.logging_config import get_logger

logger = get_logger(__name__)


class EnvoiSDK:
    """Holds one chain resolver and one HTTP resolver as independent peers.

    There is no fallback between the two; callers pick a backend or query both.
    """

    def __init__(self, http: HttpResolver, chain: ChainResolver):
        self.http = http
        self.chain = chain

    async def __aenter__(self) -> "EnvoiSDK":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Release the HTTP client."""
        await self.http.close()


def init(config: AlgodConfig, settings: Optional[ResolverSettings] = None) -> EnvoiSDK:
    """Build the SDK from algod configuration.

    Args:
        config: algod node URL, token and port for the chain resolver
        settings: Indexer URL, timeout and application ids. Defaults to environment-based settings.

    Returns:
        An EnvoiSDK exposing ``http`` and ``chain``
    """
    settings = settings or get_resolver_settings()
    logger.debug(f"Initializing resolvers (algod={config.address}, api={settings.api_base_url})")
    return EnvoiSDK(
        http=HttpResolver(settings),
        chain=ChainResolver(config, settings)
    )
