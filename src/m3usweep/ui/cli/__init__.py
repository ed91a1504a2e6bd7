"""Command line interface package."""

from m3usweep.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
