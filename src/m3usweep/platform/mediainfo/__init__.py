"""
Summary: Public surface for the metadata-extraction collaborator.
Why: Provide a stable import path for the aggregator and tests.
"""

from .session import MutagenMediaInfo

__all__ = ["MutagenMediaInfo"]
