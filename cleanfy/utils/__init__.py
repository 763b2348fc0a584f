"""Shared utilities: logging setup and result rendering."""
