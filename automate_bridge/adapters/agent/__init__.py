"""MCP stdio server for agent hosts."""
