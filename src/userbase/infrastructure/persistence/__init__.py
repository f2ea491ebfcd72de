"""Persistence adapters for the user repository."""
