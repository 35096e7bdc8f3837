# word_index/cli.py
"""
Command-line driver: index a file, then search and replace a word in it.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional
from loguru import logger

from .core.interfaces import RunConfig
from .processor import TextProcessor
from .sources import FileLineSource, FileLineSink, create_sample_file, read_lines
from .display import format_in_order, format_statistics, format_file_content

BANNER = "=" * 60
RULE = "=" * 50

def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    """Parse command-line arguments into a run configuration."""
    parser = argparse.ArgumentParser(
        description="Search and replace a word using a binary search tree index"
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Input text file (default: generate a sample file)",
    )
    parser.add_argument(
        "-s",
        "--search",
        type=str,
        required=True,
        help="Word to search for",
    )
    parser.add_argument(
        "-r",
        "--replace",
        type=str,
        required=True,
        help="Replacement word",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("output.txt"),
        help="Output file path (default: output.txt)",
    )
    parser.add_argument(
        "--sample-dir",
        type=Path,
        default=Path("."),
        help="Directory for the generated sample file",
    )
    parser.add_argument(
        "--no-index",
        action="store_true",
        help="Do not print the sorted word listing",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Silence library logging",
    )

    args = parser.parse_args(argv)
    if args.quiet:
        logger.disable("word_index")

    return RunConfig(
        search_word=args.search,
        replace_word=args.replace,
        input_path=args.input,
        output_path=args.output,
        sample_dir=args.sample_dir,
        show_index=not args.no_index,
    )

def run(config: RunConfig) -> int:
    """
    Execute one build and replace run.

    Returns:
        Process exit status
    """
    print(BANNER)
    print(" SEARCH AND REPLACE USING BINARY SEARCH TREE")
    print(BANNER)

    try:
        input_path = config.input_path
        if input_path is None:
            input_path = create_sample_file(config.sample_dir)

        source = FileLineSource(input_path)
        print(format_file_content(source.read_lines()))

        processor = TextProcessor()
        index = processor.build_index_from_source(source)

        if config.show_index:
            print()
            print(format_in_order(index))
        print()
        print(format_statistics(index))

        print()
        print(RULE)
        print(" SEARCH AND REPLACE OPERATION")
        print(RULE)

        result = processor.search_and_replace(
            config.search_word,
            config.replace_word,
            source,
            index
        )
        if not result.found:
            print(f"Word \"{config.search_word}\" not found in file!")
            return 0

        print(f"Found \"{config.search_word}\" in lines: {result.positions}")
        for line_number, count in result.line_counts.items():
            print(f"   Line {line_number}: Replaced {count} occurrence(s)")
        print(f"Total replacements made: {result.replacement_count}")

        processor.write_output(FileLineSink(config.output_path), result.lines)

        print()
        print(RULE)
        print(" OPERATION COMPLETE")
        print(RULE)
        print("\nORIGINAL FILE:")
        print(format_file_content(source.read_lines()))
        print("\nMODIFIED FILE:")
        print(format_file_content(read_lines(config.output_path)))

        # The index still describes the original file
        print()
        print(format_statistics(index))

    except OSError as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
