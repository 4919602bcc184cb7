"""Adapters connecting the domain to external tools."""
