"""Chunking, file I/O and Huffman tree building blocks for binary data."""

__version__ = "0.1.0"