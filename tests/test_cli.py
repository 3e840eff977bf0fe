import os

import pytest

from stickymaze.cli import main, parse_dimension
from stickymaze.config import VERSION

def test_parse_dimension_fallbacks():
    assert parse_dimension("7") == 7
    assert parse_dimension("0") == 0
    assert parse_dimension(None) == 10
    assert parse_dimension("abc") == 10
    assert parse_dimension("-3") == 10
    assert parse_dimension("2.5") == 10
    assert parse_dimension("+7") == 7
    assert parse_dimension("2_0") == 10
    assert parse_dimension(" 7 ") == 10
    assert parse_dimension("\u0667") == 10
    assert parse_dimension("") == 10
    assert parse_dimension("18446744073709551616") == 10

def test_oversized_width_falls_back(capsys):
    assert main(["-w", "18446744073709551616", "-h", "2", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert all(len(row) == 12 for row in lines)

def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert VERSION in capsys.readouterr().out

def test_stdout_default_size(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert all(len(row) == 12 for row in lines)

def test_short_flags_and_bad_width(capsys):
    assert main(["-w", "nope", "-h", "3", "--seed", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(len(row) == 12 for row in lines)

def test_seed_is_reproducible(capsys):
    main(["-w", "6", "-h", "4", "--seed", "42", "-m"])
    first = capsys.readouterr().out
    main(["--width", "6", "--height", "4", "--seed", "42", "--map"])
    assert capsys.readouterr().out == first
    assert first.count("S") == 1 and first.count("G") == 1

def test_output_file(tmp_path, capsys):
    out = tmp_path / "maze.txt"
    assert main(["-w", "4", "-h", "4", "-o", str(out)]) == 0
    assert capsys.readouterr().out == ""
    assert len(out.read_text().splitlines()) == 6

def test_unwritable_output_reports_and_exits_nonzero(tmp_path, capsys):
    bad = os.path.join(str(tmp_path), "missing-dir", "maze.txt")
    assert main(["-o", bad]) == 1
    assert "Error saving to file:" in capsys.readouterr().err
