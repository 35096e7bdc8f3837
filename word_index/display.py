# word_index/display.py
"""
Plain-text renderings of an index and of file contents.
"""
from typing import Iterable

from .tree import WordIndex

RULE = "=" * 50

def format_in_order(index: WordIndex) -> str:
    """List every word with its line numbers, alphabetically."""
    result = ["Unique Words in File (Sorted Alphabetically):", RULE]
    for entry in index.in_order():
        result.append(f"{entry.word:<15} : Appears in lines {entry.positions}")
    return "\n".join(result)

def format_statistics(index: WordIndex) -> str:
    result = [
        "File Statistics:",
        RULE,
        f"Total unique words: {index.unique_word_count()}",
        f"Tree height: {index.height()}",
    ]
    return "\n".join(result)

def format_file_content(lines: Iterable[str]) -> str:
    """Number lines from 1 between two rules."""
    result = ["File Content:", RULE]
    for line_number, line in enumerate(lines, start=1):
        result.append(f"{line_number:2d}: {line}")
    result.append(RULE)
    return "\n".join(result)
