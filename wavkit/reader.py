"""Reading WAV streams: format, duration, raw bytes and decoded samples."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Callable

from .format import FORMAT_CHUNK, AudioFormat, Sample, WavData, WavFormat
from .g711 import decode_alaw, decode_ulaw
from .riff import Chunk, RiffError, find_chunk, read_riff

_FLOAT_SCALE = float(2**31)
_FLOAT = struct.Struct("<f")

_Decoder = Callable[[bytes, int], int]


def to_int(value: int, bits: int) -> int:
    """Interpret an unsigned little-endian sample value as a signed integer.

    8-bit WAV PCM is unsigned, so such values are returned unchanged.
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    if bits == 8:
        return value
    if bits in (16, 32):
        value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def _decode_float(raw: bytes, offset: int) -> int:
    if offset + _FLOAT.size > len(raw):
        raise EOFError("incomplete sample")
    (value,) = _FLOAT.unpack_from(raw, offset)
    return int(value * _FLOAT_SCALE)


def _byte_decoder(decode: Callable[[int], int]) -> _Decoder:
    def decode_byte(raw: bytes, offset: int) -> int:
        if offset >= len(raw):
            raise EOFError("incomplete sample")
        return decode(raw[offset])

    return decode_byte


def _pcm_decoder(bits: int) -> _Decoder:
    width = bits // 8

    def decode_pcm(raw: bytes, offset: int) -> int:
        end = offset + width
        if end > len(raw):
            raise EOFError("incomplete sample")
        return to_int(int.from_bytes(raw[offset:end], "little"), bits)

    return decode_pcm


def _decoder_for(fmt: WavFormat) -> _Decoder:
    if fmt.audio_format == AudioFormat.IEEE_FLOAT:
        return _decode_float
    if fmt.audio_format == AudioFormat.ALAW:
        return _byte_decoder(decode_alaw)
    if fmt.audio_format == AudioFormat.MULAW:
        return _byte_decoder(decode_ulaw)
    return _pcm_decoder(fmt.bits_per_sample)


class Reader:
    """Lazily parses a WAV stream and reads its audio data."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._chunks: list[Chunk] | None = None
        self._format: WavFormat | None = None
        self._data: WavData | None = None

    def _riff_chunks(self) -> list[Chunk]:
        if self._chunks is None:
            _, self._chunks = read_riff(self._stream)
        return self._chunks

    def _load_data(self) -> WavData:
        if self._data is None:
            chunk = find_chunk(self._riff_chunks(), "data")
            if chunk is None:
                raise RiffError("data chunk is not found")
            self._data = WavData(io.BytesIO(chunk.data), chunk.size)
        return self._data

    def format(self) -> WavFormat:
        """Return the stream's format, parsing it on first use."""
        if self._format is None:
            chunk = find_chunk(self._riff_chunks(), "fmt ")
            if chunk is None:
                raise RiffError("format chunk is not found")
            if len(chunk.data) < FORMAT_CHUNK.size:
                raise RiffError("format chunk is too short")
            fmt = WavFormat(*FORMAT_CHUNK.unpack_from(chunk.data))
            if fmt.bits_per_sample == 0:
                raise ValueError("bits per sample is 0, which is invalid")
            self._format = fmt
        return self._format

    def duration(self) -> float:
        """Return the length of the audio in seconds, from the data chunk size."""
        fmt = self.format()
        data = self._load_data()
        if not fmt.block_align or not fmt.sample_rate:
            raise ValueError("block alignment and sample rate must be non-zero")
        return data.size / fmt.block_align / fmt.sample_rate

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` raw bytes of audio data (all remaining when negative)."""
        return self._load_data().read(size)

    def position(self) -> int:
        """Return how many bytes of the data chunk have been read."""
        if self._data is None:
            raise RuntimeError("data chunk not loaded yet")
        return self._data.position

    def read_samples(self, count: int = 2048) -> list[Sample]:
        """Read and decode up to ``count`` frames.

        Raises EOFError when no complete frame is left.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if count == 0:
            return []
        fmt = self.format()
        block_align = fmt.block_align
        raw = self.read(count * block_align)
        frames = len(raw) // block_align if block_align else 0
        if not frames:
            raise EOFError("no more samples")

        decode = _decoder_for(fmt)
        width = fmt.bits_per_sample // 8
        padding = [0] * max(0, 2 - fmt.num_channels)
        return [
            Sample(
                [decode(raw, start + channel * width) for channel in range(fmt.num_channels)]
                + padding
            )
            for start in range(0, frames * block_align, block_align)
        ]

    def int_value(self, sample: Sample, channel: int) -> int:
        """Return the integer value of one channel of a sample."""
        return sample.values[channel]

    def float_value(self, sample: Sample, channel: int) -> float:
        """Return one channel of a sample scaled to roughly [-1, 1)."""
        bits = self.format().bits_per_sample
        if bits == 0:
            return 0.0
        return self.int_value(sample, channel) / 2 ** (bits - 1)