"""Transport adapters (MCP stdio and HTTP) over the docforge registry."""
