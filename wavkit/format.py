"""WAV format descriptions, sample frames and the data-chunk stream."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

#: Layout of the 16-byte body of a ``fmt `` chunk.
FORMAT_CHUNK = struct.Struct("<HHIIHH")


class AudioFormat(IntEnum):
    """Audio format codes understood by the reader and writer."""

    PCM = 1
    IEEE_FLOAT = 3
    ALAW = 6
    MULAW = 7


@dataclass
class WavFormat:
    """Contents of a ``fmt `` chunk."""

    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int


@dataclass
class Sample:
    """One frame of audio: one integer value per channel."""

    values: list[int] = field(default_factory=lambda: [0, 0])


class WavData:
    """Byte stream over a ``data`` chunk that tracks how far it has been read."""

    def __init__(self, stream: BinaryIO, size: int) -> None:
        self._stream = stream
        self.size = size
        self.position = 0

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining when negative)."""
        data = self._stream.read(size)
        self.position += len(data)
        return data

    def __repr__(self) -> str:
        return f"WavData(size={self.size}, position={self.position})"