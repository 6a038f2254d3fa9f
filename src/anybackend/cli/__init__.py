"""Command-line interface for anybackend."""

from anybackend.cli.app import app

__all__ = ["app"]
