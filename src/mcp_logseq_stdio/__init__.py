"""MCP server exposing Logseq page tools over stdio."""

__version__ = "1.0.0"
