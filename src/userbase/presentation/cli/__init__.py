"""Command line interface."""

from userbase.presentation.cli.app import app

__all__ = ["app"]
