# word_index/sources.py
"""
File-backed line sources and sinks, plus the sample text generator.
"""
from pathlib import Path
from typing import Iterable, Iterator, List
from loguru import logger

SAMPLE_LINES = [
    "hello world",
    "this is a simple test",
    "hello Java",
    "hello again world",
]
SAMPLE_FILE_NAME = "sample_input.txt"

def read_lines(path: Path) -> Iterator[str]:
    """
    Yield lines of a text file without their terminators.

    Undecodable bytes become U+FFFD instead of failing the read.
    """
    with Path(path).open("r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")

def write_lines(path: Path, lines: Iterable[str]) -> None:
    """Write each line followed by a newline."""
    with Path(path).open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            f.write("\n")

class FileLineSource:
    """Line source reading a text file; every read reopens the file."""
    def __init__(self, path: Path):
        self.path = Path(path)

    def read_lines(self) -> Iterator[str]:
        return read_lines(self.path)

    def __str__(self) -> str:
        return str(self.path)

class FileLineSink:
    """Line sink writing a text file, replacing any previous content."""
    def __init__(self, path: Path):
        self.path = Path(path)

    def write_lines(self, lines: Iterable[str]) -> None:
        write_lines(self.path, lines)

    def __str__(self) -> str:
        return str(self.path)

class MemoryLineSource:
    """Line source over an in-memory list of lines."""
    def __init__(self, lines: List[str], name: str = "<memory>"):
        self.lines = list(lines)
        self.name = name

    def read_lines(self) -> Iterator[str]:
        return iter(self.lines)

    def __str__(self) -> str:
        return self.name

def create_sample_file(directory: Path = Path(".")) -> Path:
    """
    Write the four-line sample text into directory.

    Returns:
        Path of the created file
    """
    path = Path(directory) / SAMPLE_FILE_NAME
    # No terminator after the last line
    path.write_text("\n".join(SAMPLE_LINES), encoding="utf-8")
    logger.info(f"Created sample file: {path}")
    return path
