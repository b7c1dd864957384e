# chunkpress

A small toolkit for preparing binary data for compression. It splits input
into fixed-size chunks so that each chunk can be processed independently, and
it provides the first building blocks of Huffman coding: frequency counting
and tree construction.

## Command line

The package installs one command:

    chunkpress

It prints `Project Initialized` and exits with status 0. It takes no options
besides `--help`.

## Library

### Reading and writing files (`chunkpress.file_io`)

```python
from chunkpress.file_io import read_file, write_file

write_file("data.bin", b"\x01\x02\x03\x04\x05")
assert read_file("data.bin") == b"\x01\x02\x03\x04\x05"
```

`read_file` returns the whole file as `bytes` and raises `OSError` (for
example `FileNotFoundError`) when the file cannot be read. `write_file`
replaces any existing contents and raises `OSError` when the file cannot be
opened for writing.

### Splitting data into chunks (`chunkpress.chunker`)

```python
from chunkpress.chunker import Chunker

chunks = Chunker(3).split(bytes(range(1, 11)))
assert [len(c.data) for c in chunks] == [3, 3, 3, 1]
assert [c.id for c in chunks] == [0, 1, 2, 3]
```

`Chunker(chunk_size)` raises `ValueError` if `chunk_size` is not positive.
`split` returns a list of frozen `Chunk` dataclasses, each with `id` (its
position, from zero), `data` (its bytes) and `original_size` (the length of
`data`). The last chunk holds whatever remains; empty input gives an empty
list.

### Compressors and Huffman coding (`chunkpress.compressor`, `chunkpress.huffman`)

`Compressor` is an abstract base class with two abstract methods,
`compress(chunk)` and `decompress(chunk)`.

`Huffman` implements that interface and exposes the steps of Huffman coding:

```python
from chunkpress.huffman import Huffman

huffman = Huffman()
huffman.build_frequency_table(b"aaaaabbbcc")
assert huffman.frequency_table == {ord("a"): 5, ord("b"): 3, ord("c"): 2}

huffman.build_huffman_tree()
assert huffman.root.freq == 10
```

`build_frequency_table` stores a mapping of byte value to count in
`frequency_table`. `build_huffman_tree` repeatedly joins the two
lowest-frequency nodes and stores the result in `root`; with an empty table
`root` is `None`. The tree is made of `HuffmanNode` dataclasses with `byte`,
`freq`, `left` and `right`; `is_leaf()` tells a node holding a byte apart
from an internal node joining two subtrees.

## What it does not do

- `Huffman.compress` and `Huffman.decompress` return their input unchanged:
  no bit codes are generated (`huffman_codes` stays empty) and no data is
  encoded or decoded.
- The `chunkpress` command does not read, split or compress files; it only
  reports that it is ready.
- Nothing processes chunks in parallel; `Chunker` only prepares them.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.