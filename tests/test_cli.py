from pathlib import Path

import pytest

from cqlpy.cli import main


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_format_prints_formatted_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "a.cql", 'define "X": 1+2\n')

    assert main(["format", str(source)]) == 0
    assert capsys.readouterr().out == 'define "X" : 1 + 2\n'


def test_format_check_flags_unformatted_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    dirty = write(tmp_path / "dirty.cql", 'define "X": 1+2\n')
    clean = write(tmp_path / "clean.cql", 'define "X" : 1 + 2\n')

    assert main(["format", "--check", "--no-progress", str(dirty), str(clean)]) == 1
    out = capsys.readouterr().out
    assert f"{dirty}: would reformat" in out
    assert str(clean) not in out


def test_format_write_rewrites_in_place(tmp_path: Path) -> None:
    source = write(tmp_path / "a.cql", 'define "X":\n1\n')

    assert main(["format", "--write", "--indent-size", "4", str(source)]) == 0
    assert source.read_text(encoding="utf-8") == 'define "X" :\n    1\n'


def test_check_reports_positions(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "a.cql", 'define "X":\n  Foo(1\n')

    assert main(["check", str(source)]) == 1
    out = capsys.readouterr().out
    assert f"{source}:2:6: error BALANCE_UNMATCHED_OPENER" in out


def test_tokens_dump(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "a.cql", "define X")

    assert main(["tokens", str(source)]) == 0
    out = capsys.readouterr().out
    assert "KEYWORD" in out
    assert "IDENTIFIER" in out


def test_unknown_cql_version_is_a_usage_error(tmp_path: Path) -> None:
    source = write(tmp_path / "a.cql", "define X")

    with pytest.raises(SystemExit) as excinfo:
        main(["--cql-version", "9.9", "tokens", str(source)])
    assert excinfo.value.code == 2
