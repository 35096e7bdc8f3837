"""
Shared test fixtures.
"""
import pytest

from word_index.processor import TextProcessor
from word_index.sources import MemoryLineSource, SAMPLE_LINES


@pytest.fixture
def sample_lines():
    """The four-line sample text."""
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_file(tmp_path, sample_lines):
    """Write the sample text to a file."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(sample_lines) + "\n")
    return path


@pytest.fixture
def memory_source(sample_lines):
    return MemoryLineSource(sample_lines, name="sample")


@pytest.fixture
def processor(memory_source):
    """Processor with the sample text already indexed."""
    processor = TextProcessor()
    processor.build_index_from_source(memory_source)
    return processor
