"""Name resolution straight from the naming service contracts.

Each operation resolves exactly one input with one simulated contract call.
Nothing is retried and no state is shared between calls.
"""

from typing import Optional

from envoi_resolver.clients.contract_client import (
    NAME_METHOD,
    OWNER_OF_METHOD,
    ContractClient,
    create_algod_client,
)
from envoi_resolver.config import AlgodConfig, ResolverSettings, get_resolver_settings
from envoi_resolver.logging_config import get_logger
from envoi_resolver.models.records import ContractResponse
from envoi_resolver.namehash import namehash, reverse_name
from envoi_resolver.utils.encoding import bytes_to_uint, decode_fixed_string, uint_to_bytes
from envoi_resolver.utils.errors import ContractCallError, InvalidAddressError
from envoi_resolver.utils.validation import validate_address

logger = get_logger(__name__)


class ChainResolver:
    """Resolver backed by read-only calls to the resolver and token applications."""

    def __init__(
        self,
        config: AlgodConfig,
        settings: Optional[ResolverSettings] = None,
        contract_client: Optional[ContractClient] = None
    ):
        """Initialize the chain resolver.

        Args:
            config: algod node configuration
            settings: Application ids and query address. Defaults to environment-based settings.
            contract_client: Pre-built contract client, mainly for tests
        """
        self.settings = settings or get_resolver_settings()
        self.contract_client = contract_client or ContractClient(
            create_algod_client(config),
            self.settings.query_address
        )

    @staticmethod
    def _text_result(response: ContractResponse) -> str:
        if not response.success:
            return ""
        return decode_fixed_string(response.return_value)

    async def resolve_name_from_address(self, address: str) -> str:
        """Look up the name recorded in an address's reverse record.

        Args:
            address: Account address

        Returns:
            The name, or an empty string if the address is malformed, has no
            reverse record, or the node could not be queried
        """
        try:
            lookup = namehash(reverse_name(validate_address(address)))
            response = await self.contract_client.call(
                self.settings.resolver_app_id, NAME_METHOD, [lookup]
            )
        except (InvalidAddressError, ContractCallError) as e:
            logger.warning(f"Reverse lookup for {address} failed: {str(e)}")
            return ""

        return self._text_result(response)

    async def resolve_address_from_name(self, name: str) -> str:
        """Look up the owner of the naming token for a name.

        Args:
            name: Dotted name such as ``en.voi``

        Returns:
            The owning address, or an empty string if the name has an
            undecodable address label, is unresolved, or the node could not
            be queried
        """
        try:
            token_key = bytes_to_uint(namehash(name))
            response = await self.contract_client.call(
                self.settings.token_app_id, OWNER_OF_METHOD, [token_key]
            )
        except (InvalidAddressError, ContractCallError) as e:
            logger.warning(f"Owner lookup for {name} failed: {str(e)}")
            return ""

        return self._text_result(response)

    async def resolve_name_from_token(self, token_id: str) -> str:
        """Look up the name stored for a naming token.

        The token id itself, serialized to 32 bytes, is the lookup key; it is
        not namehashed.

        Args:
            token_id: Token identifier as a decimal string

        Returns:
            The name, or an empty string on any failure
        """
        try:
            key = uint_to_bytes(int(token_id))
            response = await self.contract_client.call(
                self.settings.resolver_app_id, NAME_METHOD, [key]
            )
            return self._text_result(response)
        except Exception as e:
            logger.warning(f"Token lookup for {token_id} failed: {str(e)}")
            return ""

    async def resolve_name(self, address: str) -> str:
        """Resolve one address to a name."""
        return await self.resolve_name_from_address(address)

    async def resolve_address(self, name: str) -> str:
        """Resolve one name to an address."""
        return await self.resolve_address_from_name(name)
