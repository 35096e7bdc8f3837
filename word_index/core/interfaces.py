# word_index/core/interfaces.py
"""
Core interfaces and value types shared by the index and the processor.
"""
from typing import Protocol, Dict, List, Iterable, Optional
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

class ProcessingState(Enum):
    """Lifecycle of a single processing run."""
    EMPTY = "empty"
    INDEXED = "indexed"
    REPLACED = "replaced"

@dataclass
class RunConfig:
    """Explicit configuration for one build/replace run."""
    search_word: str
    replace_word: str
    input_path: Optional[Path] = None
    output_path: Path = Path("output.txt")
    sample_dir: Path = Path(".")
    show_index: bool = True

@dataclass(frozen=True)
class WordEntry:
    """A word and the line numbers it occurs on."""
    word: str
    positions: List[int]

@dataclass
class ReplaceResult:
    """Outcome of a search-and-replace pass."""
    search_word: str
    replace_word: str
    found: bool
    positions: List[int] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    replacement_count: int = 0
    line_counts: Dict[int, int] = field(default_factory=dict)

class LineSource(Protocol):
    """Protocol for anything that can be read as a sequence of lines."""
    def read_lines(self) -> Iterable[str]: ...

class LineSink(Protocol):
    """Protocol for anything that accepts a sequence of lines."""
    def write_lines(self, lines: Iterable[str]) -> None: ...
