from __future__ import annotations
from collections.abc import Iterator
from io import StringIO
from pathlib import Path
import pytest
from sparselife.lif106 import (
    FormatError,
    MalformedRecordError,
    MissingHeaderError,
    NonNumericFieldError,
    load_cells,
    parse_cells,
    read_input_lines,
    write_cells,
)
from sparselife.life import INT64_MAX, INT64_MIN, Cell
from test_helpers import cellset


def test_parse_cells() -> None:
    lines = ["#Life 1.06", "0 1", "1 2", "-3 4", "2 -2"]
    assert parse_cells(lines) == [Cell(0, 1), Cell(1, 2), Cell(-3, 4), Cell(2, -2)]


def test_parse_cells_keeps_duplicates() -> None:
    lines = ["#Life 1.06", "0 1", "0 1", "5 5"]
    assert parse_cells(lines) == [Cell(0, 1), Cell(0, 1), Cell(5, 5)]


def test_load_cells_dedups() -> None:
    lines = ["#Life 1.06", "0 1", "0 1", "5 5"]
    assert load_cells(lines) == cellset((0, 1), (5, 5))


def test_header_only() -> None:
    assert parse_cells(["#Life 1.06"]) == []
    assert load_cells(["#Life 1.06"]) == frozenset()


def test_header_surrounding_whitespace() -> None:
    assert parse_cells(["  #Life 1.06 \n", "1 1\n"]) == [Cell(1, 1)]


def test_empty_lines_skipped() -> None:
    lines = ["#Life 1.06", "", "1 1", "\n", "2 2", ""]
    assert parse_cells(lines) == [Cell(1, 1), Cell(2, 2)]


@pytest.mark.parametrize(
    "line,exc_type",
    [
        ("   ", MalformedRecordError),
        ("\t", MalformedRecordError),
        (" ", NonNumericFieldError),
    ],
)
def test_whitespace_line_rejected(line: str, exc_type: type[FormatError]) -> None:
    with pytest.raises(exc_type) as excinfo:
        parse_cells(["#Life 1.06", line, "1 1"])
    assert excinfo.value.lineno == 2


def test_line_endings_stripped() -> None:
    lines = ["#Life 1.06\r\n", "1 2\r\n", "3 4\n"]
    assert parse_cells(lines) == [Cell(1, 2), Cell(3, 4)]


def test_signs_and_extremes() -> None:
    lines = ["#Life 1.06", f"{INT64_MIN} {INT64_MAX}", "+7 -0"]
    assert parse_cells(lines) == [Cell(INT64_MIN, INT64_MAX), Cell(7, 0)]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        [""],
        ["#Life 1.05", "0 0"],
        ["#Life 1.06 extra", "0 0"],
        ["0 0", "#Life 1.06"],
        ["#life 1.06"],
    ],
)
def test_missing_header(lines: list[str]) -> None:
    with pytest.raises(MissingHeaderError) as excinfo:
        parse_cells(lines)
    assert excinfo.value.message == "Invalid header"
    assert excinfo.value.lineno == 1
    assert str(excinfo.value) == "Invalid header (line 1)"


@pytest.mark.parametrize(
    "line",
    ["1", "1 2 3", "1  2", " 1 2", "1 2 ", "1,2"],
)
def test_malformed_record(line: str) -> None:
    with pytest.raises(MalformedRecordError) as excinfo:
        parse_cells(["#Life 1.06", "0 0", line])
    assert excinfo.value.message == "Invalid line"
    assert excinfo.value.lineno == 3


@pytest.mark.parametrize(
    "line,field",
    [
        ("a 1", "X"),
        ("1 b", "Y"),
        ("x y", "X"),
        ("1.5 2", "X"),
        ("1 2e3", "Y"),
        ("0x10 1", "X"),
        ("1_000 1", "X"),
        ("- 1", "X"),
        (f"{INT64_MAX + 1} 0", "X"),
        (f"0 {INT64_MIN - 1}", "Y"),
        ("1 ١", "Y"),
    ],
)
def test_non_numeric_field(line: str, field: str) -> None:
    with pytest.raises(NonNumericFieldError) as excinfo:
        parse_cells(["#Life 1.06", line])
    assert excinfo.value.field == field
    assert excinfo.value.message == f"{field} is not numeric"
    assert excinfo.value.lineno == 2


def test_errors_are_format_errors() -> None:
    for exc_type in (MissingHeaderError, MalformedRecordError, NonNumericFieldError):
        assert issubclass(exc_type, FormatError)
        assert issubclass(exc_type, ValueError)


def test_fail_fast() -> None:
    def lines() -> Iterator[str]:
        yield "#Life 1.06"
        yield "1 1"
        yield "bad"
        raise AssertionError("Parser read past the first error")

    with pytest.raises(MalformedRecordError):
        parse_cells(lines())


def test_read_input_lines_file(tmp_path: Path) -> None:
    path = tmp_path / "glider.life"
    path.write_text("#Life 1.06\n1 0\n\n2 1\n", encoding="utf-8")
    stdin = StringIO("should not be read\n")
    assert read_input_lines(path, stdin=stdin) == ["#Life 1.06", "1 0", "", "2 1"]


def test_read_input_lines_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.life").write_text("#Life 1.06\n3 3\n", encoding="utf-8")
    assert read_input_lines(stdin=StringIO("")) == ["#Life 1.06", "3 3"]


def test_read_input_lines_stdin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    stdin = StringIO("#Life 1.06\n1 1\n2 2\n\n3 3\n")
    assert read_input_lines(stdin=stdin) == ["#Life 1.06", "1 1", "2 2"]


def test_read_input_lines_stdin_whitespace_line(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    stdin = StringIO("#Life 1.06\n1 1\n \n2 2\n")
    lines = read_input_lines(stdin=stdin)
    assert lines == ["#Life 1.06", "1 1", " ", "2 2"]
    with pytest.raises(NonNumericFieldError) as excinfo:
        load_cells(lines)
    assert excinfo.value.field == "X"
    assert excinfo.value.lineno == 3


def test_read_input_lines_file_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.life"
    path.write_text("\ufeff#Life 1.06\n1 1\n", encoding="utf-8")
    assert read_input_lines(path) == ["#Life 1.06", "1 1"]
    assert load_cells(read_input_lines(path)) == cellset((1, 1))


def test_read_input_lines_stdin_eof(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    stdin = StringIO("#Life 1.06\n1 1")
    assert read_input_lines(stdin=stdin) == ["#Life 1.06", "1 1"]


def test_write_cells_sorted() -> None:
    fp = StringIO()
    write_cells(cellset((1, 0), (-1, 0), (0, 0), (0, -5)), fp)
    assert fp.getvalue() == "-1 0\n0 -5\n0 0\n1 0\n"


def test_write_cells_unsorted() -> None:
    fp = StringIO()
    write_cells(cellset((1, 0), (-1, 0), (0, 0)), fp, sort=False)
    assert sorted(fp.getvalue().splitlines()) == ["-1 0", "0 0", "1 0"]


def test_write_cells_empty() -> None:
    fp = StringIO()
    write_cells(frozenset(), fp)
    assert fp.getvalue() == ""


def test_write_then_load() -> None:
    cells = cellset((INT64_MIN, 0), (0, INT64_MAX), (12, -34))
    fp = StringIO()
    print("#Life 1.06", file=fp)
    write_cells(cells, fp)
    assert load_cells(fp.getvalue().splitlines()) == cells
