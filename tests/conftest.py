"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    settings,
    mock_contract_client,
    chain_resolver,
    http_backend,
    http_resolver,
    sample_name_response,
    sample_token_response,
)
