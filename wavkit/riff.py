"""Reading and writing of RIFF containers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable

_CHUNK_HEADER = struct.Struct("<4sI")
_MAX_SIZE = 0xFFFFFFFF


class RiffError(ValueError):
    """The stream is not a well-formed RIFF container."""


@dataclass(frozen=True)
class Chunk:
    """A chunk of a RIFF container: its id, declared size and contents."""

    chunk_id: str
    size: int
    data: bytes = field(repr=False)


def _encode_id(chunk_id: str | bytes) -> bytes:
    raw = chunk_id.encode("latin-1") if isinstance(chunk_id, str) else bytes(chunk_id)
    if len(raw) != 4:
        raise ValueError(f"chunk id must be four bytes long, got {chunk_id!r}")
    return raw


def _check_size(size: int) -> None:
    if not 0 <= size <= _MAX_SIZE:
        raise ValueError(f"chunk size {size} does not fit in 32 bits")


def read_riff(stream: BinaryIO) -> tuple[str, list[Chunk]]:
    """Read a RIFF container and return its form type and its chunks."""
    header = stream.read(12)
    if len(header) < 12 or header[:4] != b"RIFF":
        raise RiffError("stream is not in RIFF format")
    riff_size = int.from_bytes(header[4:8], "little")
    form_type = header[8:12].decode("latin-1")

    chunks: list[Chunk] = []
    remaining = riff_size - 4
    while remaining >= _CHUNK_HEADER.size:
        head = stream.read(_CHUNK_HEADER.size)
        if not head:
            break
        if len(head) < _CHUNK_HEADER.size:
            raise RiffError("truncated chunk header")
        raw_id, size = _CHUNK_HEADER.unpack(head)
        data = stream.read(size)
        chunks.append(Chunk(raw_id.decode("latin-1"), size, data))
        if size % 2:
            stream.read(1)
        remaining -= _CHUNK_HEADER.size + size + size % 2
    return form_type, chunks


def find_chunk(chunks: Iterable[Chunk], chunk_id: str) -> Chunk | None:
    """Return the first chunk with the given id, or None."""
    return next((chunk for chunk in chunks if chunk.chunk_id == chunk_id), None)


def write_riff_header(stream: BinaryIO, form_type: str | bytes, size: int) -> None:
    """Write the ``RIFF`` header with the given form type and size."""
    _check_size(size)
    stream.write(b"RIFF" + size.to_bytes(4, "little") + _encode_id(form_type))


def write_chunk_header(stream: BinaryIO, chunk_id: str | bytes, size: int) -> None:
    """Write a chunk header; the caller writes the chunk body."""
    _check_size(size)
    stream.write(_CHUNK_HEADER.pack(_encode_id(chunk_id), size))