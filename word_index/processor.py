# word_index/processor.py
"""
Builds a word index from lines of text and rewrites text with whole-word
substitutions.
"""
import re
from typing import List, Optional
from loguru import logger

from .tree import WordIndex
from .core.interfaces import (
    LineSource,
    LineSink,
    ProcessingState,
    ReplaceResult
)

NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")
ASCII_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]+")

def split_tokens(line: str) -> List[str]:
    """Split a line on runs of ASCII whitespace."""
    return [token for token in ASCII_WHITESPACE.split(line) if token]

def clean_word(token: str) -> str:
    """Strip everything but ASCII letters and digits, then lowercase."""
    return NON_ALPHANUMERIC.sub("", token).lower()

def replace_whole_word(line: str, search_word: str, replace_word: str) -> str:
    """Replace every whole-word, case-sensitive occurrence of search_word."""
    pattern = r"\b" + re.escape(search_word) + r"\b"
    return re.sub(pattern, lambda _: replace_word, line)

def count_replacements(original: str, modified: str, search_word: str) -> int:
    """
    Count replaced tokens by aligning whitespace tokens position by position.

    A position counts when the original token is exactly search_word and the
    modified token differs from it. The alignment drifts once a replacement
    changes the token count, so multi-word replacements may be miscounted.
    """
    original_tokens = split_tokens(original)
    modified_tokens = split_tokens(modified)

    return sum(
        1 for before, after in zip(original_tokens, modified_tokens)
        if before == search_word and before != after
    )

class TextProcessor:
    """
    Two-pass text processor: index the source once, then search and replace
    against the same unmodified source.
    """
    def __init__(self):
        self.index: Optional[WordIndex] = None
        self.source: Optional[LineSource] = None
        self.state = ProcessingState.EMPTY
        self.lines_processed = 0

    def build_index_from_source(self, source: LineSource) -> WordIndex:
        """
        Index every cleaned word of the source by line number.

        Args:
            source: Lines to index, read once
        Returns:
            The populated index
        """
        logger.info(f"Building index from {source}")
        index = WordIndex()
        line_number = 0

        for line_number, line in enumerate(source.read_lines(), start=1):
            for token in split_tokens(line):
                word = clean_word(token)
                if word:
                    index.insert(word, line_number)

        self.index = index
        self.source = source
        self.lines_processed = line_number
        self.state = ProcessingState.INDEXED

        logger.info("Index built successfully")
        logger.info(f"Processed {line_number} lines")
        return index

    def search_and_replace(
        self,
        search_word: str,
        replace_word: str,
        source: Optional[LineSource] = None,
        index: Optional[WordIndex] = None
    ) -> ReplaceResult:
        """
        Replace whole-word occurrences of search_word in the source.

        The index only decides whether the word exists; the substitution
        re-reads the source line by line.

        Args:
            search_word: Word to find; index lookup ignores case
            replace_word: Literal replacement text
            source: Lines to rewrite; defaults to the indexed source
            index: Index to consult; defaults to the one built here
        Returns:
            Result with output lines and replacement counts
        """
        index = index if index is not None else self.index
        if index is None:
            raise RuntimeError("No index has been built")
        source = source if source is not None else self.source
        if source is None:
            raise RuntimeError("No source to read")

        logger.info(f"Searching for: \"{search_word}\"")
        logger.info(f"Replacing with: \"{replace_word}\"")

        node = index.search(search_word)
        if node is None:
            logger.warning(f"Word \"{search_word}\" not found in file")
            return ReplaceResult(search_word, replace_word, found=False)

        logger.info(f"Found \"{search_word}\" in lines: {node.positions}")

        result = ReplaceResult(
            search_word,
            replace_word,
            found=True,
            positions=list(node.positions)
        )

        for line_number, line in enumerate(source.read_lines(), start=1):
            modified = replace_whole_word(line, search_word, replace_word)
            count = count_replacements(line, modified, search_word)

            if count > 0:
                result.line_counts[line_number] = count
                result.replacement_count += count
                logger.info(f"Line {line_number}: Replaced {count} occurrence(s)")

            result.lines.append(modified)

        logger.info(f"Total replacements made: {result.replacement_count}")
        self.state = ProcessingState.REPLACED
        return result

    def write_output(self, sink: LineSink, lines: List[str]) -> None:
        """Write output lines in order to the sink."""
        sink.write_lines(lines)
        logger.info(f"Modified content saved to: {sink}")
