"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from typing import final

from m3usweep.config.config import Config
from m3usweep.platform.logging import setup_logger
from m3usweep.ui.cli.args.options import SweepArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="m3usweep",
            description=(
                "Scan directories for audio files and write an extended-M3U "
                "playlist named after each directory inside it."
            ),
            epilog=(
                "Environment: M3USWEEP_LOG_LEVEL sets the diagnostic level, "
                "M3USWEEP_LOG_FILE enables a rotating log file."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "directories",
            nargs="*",
            metavar="DIRECTORY",
            help="Root directory to sweep (default: current directory)",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SweepArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SweepArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file,
            console_level=configuration.console_level,
        )

        return SweepArgs(directories=list(parsed_args.directories))
