"""Command line interface for Hubtrack."""

from hubtrack.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
