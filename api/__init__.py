"""Shunt quiz HTTP API."""
