"""Command line argument options."""

from dataclasses import dataclass, field
from typing import final


@final
@dataclass(slots=True)
class SweepArgs:
    """Root directories to sweep, in the order given."""

    directories: list[str] = field(default_factory=list)


__all__ = ["SweepArgs"]
