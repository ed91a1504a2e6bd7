"""Command line argument handling package."""

from m3usweep.ui.cli.args.parser import ArgumentParser
from m3usweep.ui.cli.args.options import SweepArgs

__all__ = ["ArgumentParser", "SweepArgs"]
