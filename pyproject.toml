[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkpress"
version = "0.1.0"
description = "Split byte streams into fixed-size chunks and build Huffman coding trees for them"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "huffman", "chunking", "binary", "files"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkpress = "chunkpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkpress"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
