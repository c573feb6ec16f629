"""Logging and I/O helpers."""
