# SPDX-License-Identifier: MIT
"""
proxer-py MCP server entrypoint.

Wires FastMCP with the tool modules under proxer/tools/. The API key and
other settings come from PROXER_* environment variables.
"""

from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP

# Import tool modules (each provides register_tools(mcp))
from .tools import news, media, entries, meta


def create_app() -> FastMCP:
    mcp = FastMCP("proxer")

    news.register_tools(mcp)
    media.register_tools(mcp)
    entries.register_tools(mcp)
    meta.register_tools(mcp)

    return mcp


def main() -> None:
    logging.basicConfig(level=os.environ.get("PROXER_LOG_LEVEL", "WARNING").upper())
    app = create_app()
    app.run()


if __name__ == "__main__":
    main()
