"""Read-only contract calls against an algod node.

Calls are never signed or submitted: each one is built as a single ABI method
call and run through algod's simulate endpoint with empty signatures allowed.
"""

# Standard library imports
import asyncio
from typing import Any, Optional, Sequence

# Third-party library imports
from algosdk import abi, error
from algosdk.atomic_transaction_composer import AtomicTransactionComposer, EmptySigner
from algosdk.v2client import algod
from algosdk.v2client.models import SimulateRequest

# Internal imports
from envoi_resolver.config import AlgodConfig
from envoi_resolver.constants import NAME_METHOD_SIGNATURE, OWNER_OF_METHOD_SIGNATURE
from envoi_resolver.logging_config import get_logger
from envoi_resolver.models.records import ContractResponse
from envoi_resolver.utils.errors import ContractCallError

# Get logger
logger = get_logger(__name__)

# ABI methods used for resolution
NAME_METHOD = abi.Method.from_signature(NAME_METHOD_SIGNATURE)
OWNER_OF_METHOD = abi.Method.from_signature(OWNER_OF_METHOD_SIGNATURE)


def create_algod_client(config: AlgodConfig) -> algod.AlgodClient:
    """Create an algod client from configuration.

    Args:
        config: Node URL, token and port

    Returns:
        An algod client bound to the configured node
    """
    return algod.AlgodClient(config.token, config.address)


class ContractClient:
    """Client that simulates read-only ABI calls on naming service applications."""

    def __init__(self, algod_client: algod.AlgodClient, sender: str):
        """Initialize the contract client.

        Args:
            algod_client: Client for the algod node
            sender: Funded address used as the sender of simulated calls
        """
        self.algod_client = algod_client
        self.sender = sender

    async def call(self, app_id: int, method: abi.Method,
                   args: Optional[Sequence[Any]] = None) -> ContractResponse:
        """Simulate one ABI method call.

        The target application is passed per call; nothing about the target
        is stored on the client.

        Args:
            app_id: Application to call
            method: ABI method to invoke
            args: Method arguments, already in ABI-ready form

        Returns:
            The simulated outcome; ``success`` is False when the contract
            rejected the call or returned nothing decodable

        Raises:
            ContractCallError: If the node could not be reached or refused the request
        """
        return await asyncio.to_thread(self._simulate, app_id, method, list(args or []))

    def _simulate(self, app_id: int, method: abi.Method, args: list) -> ContractResponse:
        """Build and simulate the call; runs in a worker thread."""
        method_name = method.get_signature()
        try:
            params = self.algod_client.suggested_params()
            composer = AtomicTransactionComposer()
            composer.add_method_call(
                app_id=app_id,
                method=method,
                sender=self.sender,
                sp=params,
                signer=EmptySigner(),
                method_args=args
            )
            request = SimulateRequest(
                txn_groups=[],
                allow_empty_signatures=True,
                allow_unnamed_resources=True
            )
            result = composer.simulate(self.algod_client, request)
        except error.AtomicTransactionComposerError as e:
            # Raised when the call completed without logging a return value
            logger.debug(f"No return value from {method_name} on app {app_id}: {str(e)}")
            return ContractResponse(success=False, failure_message=str(e))
        except (error.AlgodHTTPError, OSError) as e:
            raise ContractCallError(
                f"Contract call {method_name} on app {app_id} failed: {str(e)}",
                app_id=app_id,
                method=method_name
            ) from e

        if result.failure_message:
            logger.debug(f"Simulation of {method_name} on app {app_id} failed: {result.failure_message}")
            return ContractResponse(success=False, failure_message=result.failure_message)

        if not result.abi_results:
            return ContractResponse(success=False, failure_message="no ABI result")

        abi_result = result.abi_results[0]
        if abi_result.decode_error:
            return ContractResponse(success=False, failure_message=str(abi_result.decode_error))

        return ContractResponse(success=True, return_value=abi_result.return_value)
