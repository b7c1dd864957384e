"""The interface shared by chunk compressors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Compressor(ABC):
    """Turns a chunk of bytes into its compressed form and back."""

    @abstractmethod
    def compress(self, chunk: bytes) -> bytes:
        """Return the compressed form of ``chunk``."""

    @abstractmethod
    def decompress(self, chunk: bytes) -> bytes:
        """Return the original bytes of a compressed ``chunk``."""