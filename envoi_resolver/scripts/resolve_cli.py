#!/usr/bin/env python3
"""
CLI tool to resolve enVoi names, addresses and tokens.

Queries the HTTP indexer for every input and, for single inputs, the naming
contracts as well.

Usage:
    resolve name <address[,address,...]>
    resolve address <name[,name,...]>
    resolve search <pattern>
    resolve token <token_id[,token_id,...]>
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from envoi_resolver.config import get_algod_config, get_resolver_settings
from envoi_resolver.constants import AVATAR_FORMATS
from envoi_resolver.logging_config import configure_logging
from envoi_resolver.sdk import EnvoiSDK, init
from envoi_resolver.utils.errors import EnvoiError

COMMANDS = ("name", "address", "search", "token")

EPILOG = """
Examples:
  resolve name BRB3JP4LIW5Q755FJCGVAOA4W3THJ7BR3K6F26EVCGMETLEAZOQRHHJNLQ
  resolve address en.voi
  resolve address en.voi,test.voi
  resolve search voi
  resolve token 80067632360305829899847207196844336417360777167721505904064743996533051131418
"""


class ResolveArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on invalid usage."""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(1, f"\nError: {message}\n")


def build_parser() -> ResolveArgumentParser:
    parser = ResolveArgumentParser(
        prog="resolve",
        description="Resolve enVoi names and addresses using both HTTP and chain resolvers",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("command", type=str.lower, choices=COMMANDS, help="Lookup to perform")
    parser.add_argument("query", help="Query, comma-separated for batches")
    parser.add_argument("--avatar", choices=AVATAR_FORMATS, default="thumb",
                        help="Avatar format for token lookups (default: thumb)")
    parser.add_argument("--log-level", default=None,
                        help="Log level for diagnostics (default: ENVOI_LOG_LEVEL or WARNING)")
    return parser


def print_metadata(metadata, indent: str) -> None:
    if metadata:
        print(f"{indent}Metadata: {json.dumps(metadata, indent=2)}")


async def resolve_names(sdk: EnvoiSDK, queries: List[str]) -> None:
    http_results = await sdk.http.resolve_names_from_addresses(queries)
    print("\nResolving address(es) to name(s)...")
    print("\nHTTP Results:")
    for address, name in zip(queries, http_results):
        print(f"{address}: {name or '(not found)'}")

    # The chain resolver handles one input per call
    if len(queries) == 1:
        chain_result = await sdk.chain.resolve_name_from_address(queries[0])
        print(f"\nChain Result: {chain_result or '(not found)'}")


async def resolve_addresses(sdk: EnvoiSDK, queries: List[str]) -> None:
    http_results = await sdk.http.resolve_addresses_from_names(queries)
    print("\nResolving name(s) to address(es)...")
    print("\nHTTP Results:")
    for name, address in zip(queries, http_results):
        print(f"{name}: {address or '(not found)'}")

    if len(queries) == 1:
        chain_result = await sdk.chain.resolve_address_from_name(queries[0])
        print(f"\nChain Result: {chain_result or '(not found)'}")


async def search_names(sdk: EnvoiSDK, pattern: str) -> None:
    print(f"\nSearching for names matching: {pattern}")
    results = await sdk.http.search(pattern)
    if not results:
        print("No results found")
        return

    print("\nResults:")
    for i, record in enumerate(results, 1):
        print(f"\n{i}. {record.name}")
        print(f"   Address: {record.address}")
        print_metadata(record.metadata, "   ")


async def resolve_tokens(sdk: EnvoiSDK, queries: List[str], avatar_format: str) -> None:
    print("\nResolving token ID(s)...")
    token_infos = await sdk.http.get_token_info(queries, avatar_format)
    if not token_infos:
        print("No tokens found via HTTP")
    else:
        print("\nHTTP Results:")
        for i, info in enumerate(token_infos, 1):
            if i > 1:
                print()
            print(f"Token {i}:")
            print(f"  Name: {info.name}")
            print(f"  Address: {info.address}")
            print(f"  Token ID: {info.token_id}")
            print_metadata(info.metadata, "  ")

    if len(queries) == 1:
        chain_name = await sdk.chain.resolve_name_from_token(queries[0])
        print("\nChain Result:")
        print(f"  Name: {chain_name or '(not found)'}")


async def run(command: str, query: str, avatar_format: str = "thumb") -> None:
    """Run one lookup against both backends and print the results."""
    async with init(get_algod_config(), get_resolver_settings()) as sdk:
        if command == "search":
            await search_names(sdk, query)
            return

        queries = [q.strip() for q in query.split(",") if q.strip()]
        if command == "name":
            await resolve_names(sdk, queries)
        elif command == "address":
            await resolve_addresses(sdk, queries)
        elif command == "token":
            await resolve_tokens(sdk, queries, avatar_format)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.log_level or get_resolver_settings().log_level)
        asyncio.run(run(args.command, args.query, args.avatar))
    except EnvoiError as e:
        error = e.to_dict()
        print(f"\nError [{error['code']}]: {error['message']}", file=sys.stderr)
        if error["details"]:
            print(f"Details: {json.dumps(error['details'])}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
