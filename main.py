#!/usr/bin/env python3
"""Main entry point for the Channel Style Scripter

Supports multiple transport modes:
- http: FastAPI endpoint (POST /api/analyze) served by uvicorn
- stdio: MCP server for local desktop clients
- streamable-http: MCP server for remote access
"""

import os
import sys

from style_scripter.config import config


def main() -> None:
    # Get transport mode from environment or command line
    transport = os.getenv("APP_TRANSPORT", "http")

    if len(sys.argv) > 1:
        transport = sys.argv[1]

    print(f"Starting Channel Style Scripter with {transport} transport...", file=sys.stderr)

    if transport == "http":
        import uvicorn

        uvicorn.run(
            "style_scripter.api:app",
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
        return

    from style_scripter.fastmcp_server import mcp

    if transport == "streamable-http":
        mcp.run(transport=transport, host=config.host, port=config.port)
    else:
        mcp.run(transport=transport)


if __name__ == "__main__":
    main()
