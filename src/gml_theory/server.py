#!/usr/bin/env python3
"""
Entry point for the GML Theory MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="GML Theory MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Export to localhost dev ports instead of production hosts",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with an 'exchange:' settings mapping",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.local:
        os.environ["GML_THEORY_LOCAL"] = "1"
    if args.config:
        os.environ["GML_THEORY_CONFIG"] = args.config

    # Import after argument parsing so the exchange settings are in place
    from gml_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting GML Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting GML Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
