import dataclasses
import io

import pytest

from wavkit.format import FORMAT_CHUNK, AudioFormat, Sample, WavData, WavFormat


def test_wavdata_read_tracks_position():
    data = WavData(io.BytesIO(b"abcdef"), 6)
    assert data.read(4) == b"abcd"
    assert data.position == 4
    assert data.read() == b"ef"
    assert data.position == 6


def test_wavdata_read_past_end_keeps_position():
    data = WavData(io.BytesIO(b"xy"), 2)
    assert data.read() == b"xy"
    assert data.read(10) == b""
    assert data.position == 2


def test_wavdata_keeps_declared_size():
    data = WavData(io.BytesIO(b"xy"), 100)
    assert data.read(50) == b"xy"
    assert data.size == 100
    assert data.position == 2


def test_sample_defaults_to_two_silent_channels():
    assert Sample().values == [0, 0]


def test_samples_do_not_share_values():
    first, second = Sample(), Sample()
    first.values[0] = 5
    assert second.values == Sample().values
    assert first.values[0] == 5


def test_format_chunk_round_trip():
    fmt = WavFormat(AudioFormat.PCM, 2, 44100, 44100 * 4, 4, 16)
    packed = FORMAT_CHUNK.pack(*dataclasses.astuple(fmt))
    assert len(packed) == 16
    assert WavFormat(*FORMAT_CHUNK.unpack(packed)) == fmt


def test_format_chunk_is_little_endian():
    fmt = WavFormat(AudioFormat.PCM, 2, 44100, 44100 * 4, 4, 16)
    packed = FORMAT_CHUNK.pack(*dataclasses.astuple(fmt))
    assert packed[:2] == b"\x01\x00"


def test_audio_format_lookup():
    assert AudioFormat(7) is AudioFormat.MULAW
    with pytest.raises(ValueError):
        AudioFormat(2)