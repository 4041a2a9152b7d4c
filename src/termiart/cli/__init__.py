"""Command line interface."""

from termiart.cli.main import main

__all__ = ["main"]
