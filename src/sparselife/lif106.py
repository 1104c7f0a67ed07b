"""
Reading & writing patterns in the "Life 1.06" format

A Life 1.06 document is the header line ``#Life 1.06`` followed by one live
cell per line, given as its X and Y coordinates separated by a single space::

    #Life 1.06
    0 1
    1 2
    -3 4

Coordinates must fit in a signed 64-bit integer.  Empty lines after the
header are ignored; a line holding only whitespace is malformed.
"""

from __future__ import annotations
from collections.abc import Iterable
import logging
from pathlib import Path
import re
import sys
from typing import Optional, TextIO
from .life import Cell, in_range

log = logging.getLogger(__name__)

HEADER = "#Life 1.06"

#: The file that patterns are read from when no input file is given and one
#: exists in the current directory
DATA_FILE = Path("data.life")

INTEGER_RGX = re.compile(r"\s*[-+]?[0-9]+\s*")


class FormatError(ValueError):
    """Raised when input is not a valid Life 1.06 document"""

    default_message = "Invalid input"

    def __init__(
        self, message: Optional[str] = None, lineno: Optional[int] = None
    ) -> None:
        self.message = message if message is not None else self.default_message
        #: The 1-based line number at which the problem was found
        self.lineno = lineno
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        else:
            return f"{self.message} (line {self.lineno})"


class MissingHeaderError(FormatError):
    default_message = "Invalid header"


class MalformedRecordError(FormatError):
    default_message = "Invalid line"


class NonNumericFieldError(FormatError):
    def __init__(self, field: str, lineno: Optional[int] = None) -> None:
        #: Which coordinate failed to parse, ``"X"`` or ``"Y"``
        self.field = field
        super().__init__(f"{field} is not numeric", lineno)


def parse_coordinate(token: str, field: str, lineno: Optional[int] = None) -> int:
    if INTEGER_RGX.fullmatch(token):
        n = int(token)
        if in_range(n):
            return n
    raise NonNumericFieldError(field, lineno)


def parse_cells(lines: Iterable[str]) -> list[Cell]:
    """
    Parse the lines of a Life 1.06 document into a list of cells in input
    order, duplicates included.  Parsing stops at the first error.
    """
    it = iter(lines)
    first = next(it, None)
    if first is None or first.strip() != HEADER:
        raise MissingHeaderError(lineno=1)
    cells: list[Cell] = []
    for lineno, line in enumerate(it, start=2):
        line = line.rstrip("\r\n")
        if not line:
            continue
        fields = line.split(" ")
        if len(fields) != 2:
            raise MalformedRecordError(lineno=lineno)
        x = parse_coordinate(fields[0], "X", lineno)
        y = parse_coordinate(fields[1], "Y", lineno)
        cells.append(Cell(x, y))
    return cells


def load_cells(lines: Iterable[str]) -> frozenset[Cell]:
    cells = parse_cells(lines)
    live = frozenset(cells)
    if len(live) < len(cells):
        log.debug("Dropped %d duplicate cell(s)", len(cells) - len(live))
    log.info("Loaded %d live cell(s)", len(live))
    return live


def read_input_lines(
    path: Optional[Path] = None, stdin: Optional[TextIO] = None
) -> list[str]:
    """
    Read the lines of a pattern from ``path`` (default: `DATA_FILE`) if it
    exists.  Otherwise, read lines from ``stdin`` (default: `sys.stdin`) up to
    the first empty line or end of input.
    """
    if path is None:
        path = DATA_FILE
    if path.exists():
        log.info("Reading pattern from %s", path)
        return path.read_text(encoding="utf-8-sig").splitlines()
    log.info("Reading pattern from standard input; end with an empty line")
    if stdin is None:
        stdin = sys.stdin
    lines: list[str] = []
    for line in stdin:
        line = line.rstrip("\r\n")
        if not line:
            break
        lines.append(line)
    return lines


def format_cell(c: Cell) -> str:
    return f"{c.x} {c.y}"


def write_cells(cells: Iterable[Cell], fp: TextIO, sort: bool = True) -> None:
    """Write each cell to ``fp`` as an ``X Y`` line"""
    if sort:
        cells = sorted(cells)
    for c in cells:
        print(format_cell(c), file=fp)
