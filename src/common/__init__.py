"""Shared helpers: HTTP, logging and payload validation."""
