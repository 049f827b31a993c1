"""Constants used throughout the envoi resolver.

This module defines network defaults and API paths so they are not duplicated.
"""

# Voi mainnet algod node used when no configuration is supplied
MAINNET_ALGOD_URL = "https://mainnet-api.voi.nodely.dev"
MAINNET_ALGOD_PORT = 443
MAINNET_ALGOD_TOKEN = ""

# enVoi indexing service
API_BASE_URL = "https://api.envoi.sh"
DEFAULT_HTTP_TIMEOUT = 5.0  # seconds

# Naming service applications
RESOLVER_APP_ID = 797608
VNS_TOKEN_APP_ID = 797609

# Funded account used as the sender of simulated read-only calls
QUERY_ADDRESS = "G3MSA75OZEJTCCENOJDLDJK7UD7E2K5DNC7FVHCNOV7E3I4DTXTOWDUIFQ"

# Address format
ADDRESS_LENGTH = 58
NODE_HASH_SIZE = 32
REVERSE_SUFFIX = "addr.reverse"

# ABI method signatures
NAME_METHOD_SIGNATURE = "name(byte[32])byte[256]"
OWNER_OF_METHOD_SIGNATURE = "arc72_ownerOf(uint256)address"

# HTTP API paths
NAME_PATH = "/api/name/{}"
ADDRESS_PATH = "/api/address/{}"
SEARCH_PATH = "/api/search"
TOKEN_PATH = "/api/token/{}"

AVATAR_FORMATS = ("thumb", "full")
