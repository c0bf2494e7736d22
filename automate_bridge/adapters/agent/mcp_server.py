"""Automate Bridge MCP stdio server — FastMCP entrypoint."""

import builtins
import sys

# === stdout protection ===
# MCP JSON-RPC uses stdout exclusively. Route module prints to stderr so
# client logging never corrupts the protocol.
_original_print = builtins.print


def _safe_print(*args, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    _original_print(*args, **kwargs)


builtins.print = _safe_print

from mcp.server.fastmcp import FastMCP  # noqa: E402

mcp = FastMCP(
    "automate-bridge",
    instructions="Drive a remote browser/desktop automation engine: check health, "
    "generate actions from an objective, execute action lists, or run an objective directly.",
)

# Import tool modules to register them with mcp
from automate_bridge.adapters.agent import tools  # noqa: F401, E402


def main():
    """Run the MCP server via stdio transport."""
    mcp.run(transport="stdio")
