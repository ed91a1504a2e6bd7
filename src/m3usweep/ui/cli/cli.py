"""Command line interface for m3usweep."""

import sys
from typing import final

from m3usweep.application.services import SweepResult, sweep_all
from m3usweep.platform.logging import logger
from m3usweep.ui.cli.args import ArgumentParser, SweepArgs


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> list[SweepResult]:
        """Sweep every directory named on the command line.

        Per-directory failures are reported as diagnostics only; they do not
        change the exit status.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            list[SweepResult]: One result per swept directory.
        """
        try:
            args: SweepArgs = ArgumentParser.process_args(args_list)
            return sweep_all(args.directories)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    _ = CommandProcessor.process_command()
    return 0
