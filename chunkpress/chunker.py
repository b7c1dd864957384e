"""Splitting byte buffers into fixed-size chunks for parallel compression."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """A numbered slice of an input buffer."""

    id: int
    data: bytes
    original_size: int


class Chunker:
    """Splits input data into consecutive chunks of at most ``chunk_size`` bytes."""

    def __init__(self, chunk_size: int) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size

    def split(self, data: bytes) -> list[Chunk]:
        """Return the chunks of ``data`` in order; the last one holds the remainder."""
        payload = bytes(data)
        return [
            Chunk(id=index, data=piece, original_size=len(piece))
            for index, piece in enumerate(
                payload[offset:offset + self.chunk_size]
                for offset in range(0, len(payload), self.chunk_size)
            )
        ]