"""Shared helpers: constants, logging and timestamp formatting."""
