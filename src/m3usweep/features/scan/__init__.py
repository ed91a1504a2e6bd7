"""
Summary: Filesystem scanning for candidate audio files.
Why: Re-export the classifier and walker under one import path.
"""

from .classifier import file_extension, is_audio_candidate
from .walker import WalkErrorCallback, collect_audio_files, report_walk_error

__all__ = [
    "WalkErrorCallback",
    "collect_audio_files",
    "file_extension",
    "is_audio_candidate",
    "report_walk_error",
]
