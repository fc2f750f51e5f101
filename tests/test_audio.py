import pytest

from voicenote.audio import AudioResource, LocalAudioResource, format_size


def test_local_resource_implements_abc():
    assert issubclass(LocalAudioResource, AudioResource)


def test_existing_file(tmp_path):
    clip = tmp_path / "clip.m4a"
    clip.write_bytes(b"x" * 2048)
    audio = LocalAudioResource(clip)

    assert audio.exists()
    assert audio.size() == 2048
    assert audio.read() == b"x" * 2048
    assert audio.name == str(clip)


def test_missing_file(tmp_path):
    audio = LocalAudioResource(tmp_path / "missing.m4a")

    assert not audio.exists()
    assert audio.size() is None


def test_directory_is_not_an_audio_file(tmp_path):
    assert not LocalAudioResource(tmp_path).exists()


def test_accepts_string_path(tmp_path):
    clip = tmp_path / "clip.m4a"
    clip.write_bytes(b"data")
    assert LocalAudioResource(str(clip)).exists()


@pytest.mark.parametrize(
    "size, expected",
    [
        (2048, "2 KB"),
        (1536, "2 KB"),
        (100, "0 KB"),
        (0, "unknown"),
        (None, "unknown"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected
