"""Huffman frequency analysis and tree construction for byte chunks."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count

from chunkpress.compressor import Compressor


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a byte value."""

    byte: int
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None


class Huffman(Compressor):
    """Builds Huffman frequency tables and trees for byte chunks."""

    def __init__(self) -> None:
        self.root: HuffmanNode | None = None
        self.frequency_table: dict[int, int] = {}
        self.huffman_codes: dict[int, str] = {}

    def compress(self, chunk: bytes) -> bytes:
        """Return the chunk's bytes; data currently passes through unchanged."""
        return bytes(chunk)

    def decompress(self, chunk: bytes) -> bytes:
        """Return the chunk's bytes; data currently passes through unchanged."""
        return bytes(chunk)

    def build_frequency_table(self, chunk: bytes) -> None:
        """Count how often each byte value occurs in ``chunk``."""
        self.frequency_table = dict(Counter(bytes(chunk)))

    def build_huffman_tree(self) -> None:
        """Build the Huffman tree from the frequency table.

        The root is left as None when the table is empty.
        """
        tiebreak = count()
        heap = [
            (freq, next(tiebreak), HuffmanNode(byte, freq))
            for byte, freq in self.frequency_table.items()
        ]
        if not heap:
            self.root = None
            return
        heapq.heapify(heap)

        while len(heap) > 1:
            _, _, left = heapq.heappop(heap)
            _, _, right = heapq.heappop(heap)
            parent = HuffmanNode(0, left.freq + right.freq, left, right)
            heapq.heappush(heap, (parent.freq, next(tiebreak), parent))

        self.root = heap[0][2]