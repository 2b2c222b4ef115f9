"""Shared helpers for the API and the CLI."""
