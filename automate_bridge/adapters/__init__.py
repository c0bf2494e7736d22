"""Outer adapters — web API and MCP agent host."""
