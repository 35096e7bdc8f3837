# word_index/__init__.py
"""
Word position index backed by a binary search tree, with whole-word
search and replace.
"""
from .__about__ import __version__

from .tree import WordIndex, WordNode
from .processor import TextProcessor, clean_word, count_replacements
from .sources import FileLineSource, FileLineSink, MemoryLineSource
from .core.interfaces import RunConfig, ReplaceResult, WordEntry, ProcessingState

__all__ = [
    "__version__",
    "WordIndex",
    "WordNode",
    "TextProcessor",
    "clean_word",
    "count_replacements",
    "FileLineSource",
    "FileLineSink",
    "MemoryLineSource",
    "RunConfig",
    "ReplaceResult",
    "WordEntry",
    "ProcessingState"
]
