"""Name resolution through the enVoi indexing API.

The indexer accepts comma-separated batches and answers with a ``results``
array. Every failure (network error, timeout, non-2xx status, malformed body)
is logged and turned into an empty result of the documented shape.
"""

# Standard library imports
import asyncio
from typing import Dict, List, Optional, Sequence, Union

# Third-party library imports
import httpx

# Internal imports
from envoi_resolver.config import ResolverSettings, get_resolver_settings
from envoi_resolver.constants import (
    ADDRESS_PATH,
    AVATAR_FORMATS,
    NAME_PATH,
    SEARCH_PATH,
    TOKEN_PATH,
)
from envoi_resolver.logging_config import get_logger
from envoi_resolver.models.records import NameRecord, ResolverResponse, TokenRecord

# Get logger
logger = get_logger(__name__)

QueryInput = Union[str, Sequence[str]]


def as_query_list(value: QueryInput) -> List[str]:
    """Normalize a single identifier or a sequence of identifiers to a list."""
    if isinstance(value, str):
        return [value]
    return list(value)


class HttpResolver:
    """Resolver backed by the enVoi HTTP indexer."""

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the HTTP resolver.

        Args:
            settings: Resolver settings. Defaults to environment-based settings.
            client: Pre-built HTTP client, mainly for tests
        """
        self.settings = settings or get_resolver_settings()
        self.base_url = self.settings.api_base_url
        self.timeout = self.settings.http_timeout

        # Shared HTTP client, reused for every call
        self._http_client = client or httpx.AsyncClient(timeout=self.timeout)

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> ResolverResponse:
        """Issue one GET request and parse the response envelope.

        The request is cancelled if it does not settle within the timeout.

        Raises:
            httpx.HTTPStatusError: If the response status is not 2xx
            httpx.HTTPError: If there's a network or request error
            asyncio.TimeoutError: If the request times out
            ValueError: If the body is not a valid response envelope
        """
        response = await asyncio.wait_for(
            self._http_client.get(f"{self.base_url}{path}", params=params),
            timeout=self.timeout
        )
        response.raise_for_status()
        return ResolverResponse.model_validate(response.json())

    def _align(self, values: List[str], expected: int, operation: str) -> List[str]:
        """Fit positional results to the number of queries."""
        if len(values) != expected:
            logger.warning(
                f"{operation}: expected {expected} results, backend returned {len(values)}"
            )
        values = values[:expected]
        return values + [""] * (expected - len(values))

    async def resolve_names_from_addresses(self, address: QueryInput) -> List[str]:
        """Resolve addresses to names.

        Results are matched to queries by position; the backend is assumed to
        preserve request order.

        Args:
            address: An address or a sequence of addresses

        Returns:
            One name per address, in input order; empty string where unresolved
        """
        addresses = as_query_list(address)
        if not addresses:
            return []
        try:
            data = await self._get(NAME_PATH.format(",".join(addresses)))
        except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching name from address: {e!r}")
            return [""] * len(addresses)

        names = [result.name or "" for result in data.results]
        return self._align(names, len(addresses), "resolve_names_from_addresses")

    async def resolve_addresses_from_names(self, name: QueryInput) -> List[str]:
        """Resolve names to addresses.

        Args:
            name: A name or a sequence of names

        Returns:
            One address per name, in input order; empty string where unresolved
        """
        names = as_query_list(name)
        if not names:
            return []
        try:
            data = await self._get(ADDRESS_PATH.format(",".join(names)))
        except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching address from name: {e!r}")
            return [""] * len(names)

        addresses = [result.address or "" for result in data.results]
        return self._align(addresses, len(names), "resolve_addresses_from_names")

    async def search(self, pattern: str) -> List[NameRecord]:
        """Search names matching a free-text pattern.

        Args:
            pattern: Search pattern

        Returns:
            Matching records; empty on failure or when nothing matches
        """
        try:
            data = await self._get(SEARCH_PATH, params={"pattern": pattern})
        except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error searching names: {e!r}")
            return []

        return [
            NameRecord(
                name=result.name or "",
                address=result.address or "",
                metadata=result.metadata
            )
            for result in data.results
        ]

    async def get_token_info(self, token_id: QueryInput, avatar_format: str = "thumb") -> List[TokenRecord]:
        """Fetch naming token details.

        Records the backend returns without a token id are dropped, so the
        result can be shorter than the input and is not positionally aligned.

        Args:
            token_id: A token id or a sequence of token ids (decimal strings)
            avatar_format: "thumb" or "full"

        Returns:
            Token records that carried a token id; empty for an unknown
            avatar format
        """
        if avatar_format not in AVATAR_FORMATS:
            logger.error(
                f"Unsupported avatar format {avatar_format!r}, expected one of: {', '.join(AVATAR_FORMATS)}"
            )
            return []

        token_ids = as_query_list(token_id)
        if not token_ids:
            return []
        try:
            data = await self._get(
                TOKEN_PATH.format(",".join(token_ids)),
                params={"avatar": avatar_format}
            )
        except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching token info: {e!r}")
            return []

        return [
            TokenRecord(
                token_id=result.token_id,
                name=result.name or "",
                address=result.address or "",
                metadata=result.metadata
            )
            for result in data.results
            if result.token_id
        ]

    async def resolve_name(self, address: str) -> str:
        """Resolve one address to a name."""
        return (await self.resolve_names_from_addresses(address))[0]

    async def resolve_address(self, name: str) -> str:
        """Resolve one name to an address."""
        return (await self.resolve_addresses_from_names(name))[0]

    async def __aenter__(self) -> "HttpResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP client and release resources."""
        await self._http_client.aclose()
