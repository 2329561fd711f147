"""Adaptadores de I/O (HTTP, parsing HTML)."""
