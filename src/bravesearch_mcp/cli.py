# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Command-line entry point.

Usage::

    BRAVE_API_KEY=... bravesearch-mcp stdio
    bravesearch-mcp --api-key ... sse --port 3000
    bravesearch-mcp --api-key ... http --path /mcp
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
from typing import Any

from .config import ENV_API_KEY, BraveSearchConfig
from .errors import ConfigError
from .router import BraveSearchRouter
from .search_tools import build_server
from .server import MCPServer
from .utils import get_logger, setup_logger


_COMMAND_TRANSPORTS = {"stdio": "stdio", "sse": "sse", "http": "streamable-http"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bravesearch-mcp", description="Brave Search MCP Server")
    parser.add_argument(
        "-k",
        "--api-key",
        default=None,
        help=f"Brave API key (defaults to the {ENV_API_KEY} environment variable)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG or INFO")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("stdio", help="Run the server over stdio")

    sse = commands.add_parser("sse", help="Run the server over HTTP with Server-Sent Events")
    _add_http_options(sse)

    http = commands.add_parser("http", help="Run the server over Streamable HTTP")
    _add_http_options(http)
    http.add_argument("--path", default="/mcp", help="Endpoint path (default: /mcp)")

    return parser


def _add_http_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, default=3000, help="Port to listen on (default: 3000)")
    parser.add_argument(
        "--allowed-host",
        action="append",
        default=[],
        metavar="HOST:PORT",
        help="Extra Host header value accepted by the DNS-rebinding guard; repeatable",
    )


def transport_options(args: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    """Map parsed arguments onto a transport name and its ``run`` keywords."""
    transport = _COMMAND_TRANSPORTS[args.command]
    if transport == "stdio":
        return transport, {}
    options: dict[str, Any] = {"host": args.host, "port": args.port}
    if transport == "streamable-http":
        options["path"] = args.path
    return transport, options


async def serve(config: BraveSearchConfig, args: argparse.Namespace) -> None:
    transport, options = transport_options(args)
    http_security = None
    if getattr(args, "allowed_host", None):
        http_security = MCPServer.default_http_security_settings(args.allowed_host)

    async with BraveSearchRouter.from_config(config) as router:
        server = build_server(router, http_security=http_security)
        await server.serve(transport=transport, **options)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(level=args.log_level, use_json=True if args.log_json else None, force=True)
    logger = get_logger("bravesearch_mcp.cli")

    try:
        config = BraveSearchConfig.from_env(api_key=args.api_key)
    except ConfigError as exc:
        parser.error(str(exc))

    logger.info("Starting Brave Search MCP server (%s)", args.command)
    try:
        asyncio.run(serve(config, args))
    except KeyboardInterrupt:
        logger.info("Shutting down")
    return 0


__all__ = ["build_parser", "main", "serve", "transport_options"]
