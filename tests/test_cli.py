"""
Tests for the command-line driver.
"""
from pathlib import Path

from word_index.cli import main, parse_args
from word_index.core.interfaces import RunConfig


def test_parse_args_defaults():
    config = parse_args(["-s", "hello", "-r", "hi"])
    assert config == RunConfig(search_word="hello", replace_word="hi")
    assert config.input_path is None
    assert config.output_path == Path("output.txt")


def test_parse_args_full(tmp_path):
    config = parse_args([
        str(tmp_path / "in.txt"),
        "--search", "a",
        "--replace", "b",
        "--output", str(tmp_path / "out.txt"),
        "--no-index",
    ])
    assert config.input_path == tmp_path / "in.txt"
    assert config.output_path == tmp_path / "out.txt"
    assert not config.show_index


def test_main_replaces(sample_file, tmp_path, capsys):
    """Test a full run writes the modified file."""
    output = tmp_path / "out.txt"
    status = main([str(sample_file), "-s", "hello", "-r", "hi", "-o", str(output)])
    assert status == 0
    assert output.read_text() == "hi world\nthis is a simple test\nhi Java\nhi again world\n"
    # Input is never modified
    assert sample_file.read_text().startswith("hello world")

    out = capsys.readouterr().out
    assert "Total replacements made: 3" in out
    assert "Found \"hello\" in lines: [1, 3, 4]" in out
    assert "Total unique words: 9" in out


def test_main_generates_sample(tmp_path, capsys):
    output = tmp_path / "out.txt"
    status = main(["-s", "world", "-r", "earth", "-o", str(output), "--sample-dir", str(tmp_path)])
    assert status == 0
    assert (tmp_path / "sample_input.txt").exists()
    assert output.read_text().splitlines() == [
        "hello earth",
        "this is a simple test",
        "hello Java",
        "hello again earth",
    ]


def test_main_missing_word(sample_file, tmp_path, capsys):
    """Test a search miss writes nothing."""
    output = tmp_path / "out.txt"
    status = main([str(sample_file), "-s", "xyz", "-r", "abc", "-o", str(output)])
    assert status == 0
    assert not output.exists()
    assert "Word \"xyz\" not found in file!" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    output = tmp_path / "out.txt"
    status = main([str(tmp_path / "missing.txt"), "-s", "a", "-r", "b", "-o", str(output)])
    assert status == 1
    assert not output.exists()
    assert "Error:" in capsys.readouterr().err


def test_main_non_utf8_input(tmp_path, capsys):
    """Test a latin-1 input file is indexed and rewritten."""
    path = tmp_path / "latin1.txt"
    path.write_bytes("caf\xe9 hello world\n".encode("latin-1"))
    output = tmp_path / "out.txt"
    status = main([str(path), "-s", "hello", "-r", "hi", "-o", str(output)])
    assert status == 0
    assert output.read_text(encoding="utf-8") == "caf\ufffd hi world\n"

    out = capsys.readouterr().out
    assert "caf              : Appears in lines [1]" in out
    assert "Total replacements made: 1" in out
