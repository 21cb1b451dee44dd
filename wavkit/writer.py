"""Writing PCM WAV streams."""

from __future__ import annotations

import dataclasses
from typing import BinaryIO, Iterable

from .format import FORMAT_CHUNK, AudioFormat, Sample, WavFormat
from .riff import write_chunk_header, write_riff_header


def to_uint(value: int, bits: int) -> int:
    """Convert a signed sample value to its unsigned representation."""
    if bits in (8, 16, 32):
        return value & ((1 << bits) - 1)
    if value < 0:
        return (1 << bits) + value
    return value


class Writer:
    """Writes a PCM WAV header on creation, then raw samples on request."""

    def __init__(
        self,
        stream: BinaryIO,
        num_samples: int,
        num_channels: int,
        sample_rate: int,
        bits_per_sample: int,
    ) -> None:
        block_align = num_channels * bits_per_sample // 8
        self.stream = stream
        self.format = WavFormat(
            int(AudioFormat.PCM),
            num_channels,
            sample_rate,
            sample_rate * block_align,
            block_align,
            bits_per_sample,
        )
        data_size = num_samples * block_align
        write_riff_header(stream, "WAVE", 4 + 8 + FORMAT_CHUNK.size + 8 + data_size)
        write_chunk_header(stream, "fmt ", FORMAT_CHUNK.size)
        stream.write(FORMAT_CHUNK.pack(*dataclasses.astuple(self.format)))
        write_chunk_header(stream, "data", data_size)

    def write_samples(self, samples: Iterable[Sample]) -> None:
        """Encode samples as little-endian PCM and write them to the stream."""
        bits = self.format.bits_per_sample
        channels = self.format.num_channels
        shifts = range(0, bits, 8)
        out = bytearray()
        for sample in samples:
            if len(sample.values) < channels:
                raise ValueError(
                    f"sample has {len(sample.values)} values, {channels} channels expected"
                )
            for value in sample.values[:channels]:
                raw = to_uint(value, bits)
                out.extend((raw >> shift) & 0xFF for shift in shifts)
        self.stream.write(bytes(out))