"""Tests for the mutagen-backed metadata collaborator."""

from __future__ import annotations

import wave
from pathlib import Path
from typing import Any

import pytest
from mutagen.asf import ASF, ASFDWordAttribute, ASFUnicodeAttribute
from mutagen.id3 import ID3, TALB, TIT2, TPE1, TRCK
from mutagen.wave import WAVE
from pytest_mock import MockerFixture

from m3usweep.features.playlist.usecases import MediaInfoPort
from m3usweep.platform.mediainfo import MutagenMediaInfo
from m3usweep.platform.mediainfo._tag_utils import first_text, parse_slash_separated


def _write_silent_wav(path: Path, seconds: float, rate: int = 8000) -> Path:
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(rate)
        handle.writeframes(b"\x00\x00" * int(rate * seconds))
    return path


@pytest.fixture
def tagged_wav(tmp_path: Path) -> Path:
    """A 2.5 second WAV file with an ID3 chunk."""

    path = _write_silent_wav(tmp_path / "tagged.wav", 2.5)
    audio = WAVE(path)
    audio.add_tags()
    assert audio.tags is not None
    audio.tags.add(TPE1(encoding=3, text=["Boards of Canada"]))
    audio.tags.add(TIT2(encoding=3, text=["Roygbiv"]))
    audio.tags.add(TALB(encoding=3, text=["Music Has the Right to Children"]))
    audio.tags.add(TRCK(encoding=3, text=["7/18"]))
    audio.save()
    return path


def _fake_audio(mocker: MockerFixture, tags: Any, length: float | None = 61.5, spec: type | None = None) -> Any:
    audio = mocker.MagicMock(spec=spec) if spec else mocker.MagicMock()
    audio.tags = tags
    audio.info.length = length
    return audio


def test_satisfies_port() -> None:
    assert isinstance(MutagenMediaInfo(), MediaInfoPort)


def test_reads_real_wav_with_id3_chunk(tagged_wav: Path) -> None:
    media_info = MutagenMediaInfo()

    assert media_info.open(str(tagged_wav))
    assert media_info.get_performer() == "Boards of Canada"
    assert media_info.get_title() == "Roygbiv"
    assert media_info.get_album() == "Music Has the Right to Children"
    assert media_info.get_track_number() == 7
    assert media_info.get_duration_ms() == 2500
    media_info.close()


def test_untagged_wav_reports_absent_text(tmp_path: Path) -> None:
    path = _write_silent_wav(tmp_path / "plain.wav", 1.0)
    media_info = MutagenMediaInfo()

    assert media_info.open(str(path))
    assert media_info.get_performer() == ""
    assert media_info.get_title() == ""
    assert media_info.get_track_number() is None
    assert media_info.get_duration_ms() == 1000


@pytest.mark.parametrize("name", ["empty.mp3", "empty.flac", "noise.ogg"])
def test_unreadable_files_fail_to_open(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    _ = path.write_bytes(b"" if name.startswith("empty") else b"not audio at all")

    assert not MutagenMediaInfo().open(str(path))


def test_missing_file_fails_to_open(tmp_path: Path) -> None:
    assert not MutagenMediaInfo().open(str(tmp_path / "missing.mp3"))


def test_easy_tags(mocker: MockerFixture) -> None:
    """MP3/FLAC/Ogg/M4A expose lowercase easy keys holding string lists."""

    audio = _fake_audio(
        mocker,
        {"artist": ["X"], "title": ["Song"], "album": [""], "tracknumber": ["2/12"]},
        length=125.9999,
    )
    file_mock = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.mp3")
    file_mock.assert_called_once_with("/music/a.mp3", easy=True)
    assert media_info.get_performer() == "X"
    assert media_info.get_title() == "Song"
    assert media_info.get_album() == ""
    assert media_info.get_track_number() == 2
    assert media_info.get_duration_ms() == 125999


def test_asf_tags(mocker: MockerFixture) -> None:
    """WMA files use ASF attribute names and attribute objects."""

    audio = _fake_audio(
        mocker,
        {
            "Author": [ASFUnicodeAttribute("Artist")],
            "Title": [ASFUnicodeAttribute("Name")],
            "WM/AlbumTitle": [ASFUnicodeAttribute("Record")],
            "WM/TrackNumber": [ASFDWordAttribute(4)],
        },
        spec=ASF,
    )
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.wma")
    assert media_info.get_performer() == "Artist"
    assert media_info.get_title() == "Name"
    assert media_info.get_album() == "Record"
    assert media_info.get_track_number() == 4


def test_id3_frames(mocker: MockerFixture) -> None:
    tags = ID3()
    tags.add(TPE1(encoding=3, text=["Performer"]))
    audio = _fake_audio(mocker, tags)
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.wav")
    assert media_info.get_performer() == "Performer"
    assert media_info.get_title() == ""


def test_missing_tags_and_length(mocker: MockerFixture) -> None:
    audio = _fake_audio(mocker, None, length=None)
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.ogg")
    assert media_info.get_performer() == ""
    assert media_info.get_duration_ms() is None


def test_unrecognised_container(mocker: MockerFixture) -> None:
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=None)
    assert not MutagenMediaInfo().open("/music/a.m4a")


def test_close_resets_state(mocker: MockerFixture) -> None:
    audio = _fake_audio(mocker, {"artist": ["X"]})
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.mp3")
    media_info.close()

    assert media_info.get_performer() == ""
    assert media_info.get_track_number() is None
    assert media_info.get_duration_ms() is None


def test_reopening_releases_previous_file(mocker: MockerFixture) -> None:
    first = _fake_audio(mocker, {"artist": ["First"]})
    _ = mocker.patch(
        "m3usweep.platform.mediainfo.session.mutagen.File", side_effect=[first, None]
    )
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/1.mp3")
    assert not media_info.open("/music/2.mp3")
    assert media_info.get_performer() == ""


class TestTagUtils:
    """Pure helpers used by the collaborator."""

    def test_first_text(self) -> None:
        assert first_text(None) == ""
        assert first_text([]) == ""
        assert first_text(["a", "b"]) == "a"
        assert first_text(TPE1(encoding=3, text=["frame"])) == "frame"
        assert first_text([ASFDWordAttribute(9)]) == "9"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3", (3, None)),
            ("3/12", (3, 12)),
            (" 4 / 9 ", (4, 9)),
            ("", (None, None)),
            ("A1", (None, None)),
            ("/12", (None, 12)),
            ("²", (None, None)),
            ("3/²", (3, None)),
            ("١٢", (12, None)),
        ],
    )
    def test_parse_slash_separated(self, value: str, expected: tuple[int | None, int | None]) -> None:
        assert parse_slash_separated(value) == expected


def test_superscript_track_number_is_absent(mocker: MockerFixture) -> None:
    audio = _fake_audio(mocker, {"artist": ["X"], "tracknumber": ["²"]})
    _ = mocker.patch("m3usweep.platform.mediainfo.session.mutagen.File", return_value=audio)
    media_info = MutagenMediaInfo()

    assert media_info.open("/music/a.mp3")
    assert media_info.get_track_number() is None
    assert media_info.get_performer() == "X"
