"""Tests for the audio extension classifier."""

from pathlib import Path, PurePosixPath

import pytest

from m3usweep.config.settings import AUDIO_EXTENSIONS
from m3usweep.features.scan import file_extension, is_audio_candidate


@pytest.mark.parametrize("extension", sorted(AUDIO_EXTENSIONS))
def test_allow_listed_extensions_are_candidates(extension: str) -> None:
    """Every allow-listed extension is accepted."""

    assert is_audio_candidate(Path(f"music/track.{extension}"))


@pytest.mark.parametrize(
    "name",
    [
        "track.MP3",
        "track.Flac",
        "cover.jpg",
        "notes.txt",
        "track.mp3.bak",
        "README",
        ".mp3",
        "track.",
        "track.opus",
    ],
)
def test_other_names_are_rejected(name: str) -> None:
    """Matching is exact and case-sensitive; no extension means no match."""

    assert not is_audio_candidate(Path(name))


def test_undecodable_extension_is_rejected() -> None:
    """An extension holding surrogate-escaped bytes is not valid text."""

    path = PurePosixPath("track.mp\udcff")
    assert file_extension(path) is None
    assert not is_audio_candidate(path)


def test_file_extension_strips_dot() -> None:
    assert file_extension(Path("a/b/song.ogg")) == "ogg"
    assert file_extension(Path("a/b/song")) is None


def test_allow_list_is_immutable() -> None:
    assert isinstance(AUDIO_EXTENSIONS, frozenset)
    assert AUDIO_EXTENSIONS == {"mp3", "ogg", "flac", "wav", "m4a", "wma"}
