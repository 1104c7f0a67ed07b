"""
Conway's Game of Life over a sparse set of live cells

A generation is a `frozenset` of `Cell` coordinates; there is no grid.  The
only dead cells ever examined are those bordering a live cell, as no other
dead cell can have the three live neighbors it needs to spawn.

Coordinates are confined to the signed 64-bit range.  A cell on the edge of
that range simply has fewer neighbors: offsets that would step past the edge
are never examined.
"""

from __future__ import annotations
from collections.abc import Iterator
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Optional

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

#: The ``(dx, dy)`` offsets of a cell's eight neighbors, clockwise from the
#: upper left
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


@dataclass(frozen=True, order=True)
class Cell:
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


def in_range(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


def neighbors(c: Cell) -> Iterator[Cell]:
    """
    Yield the neighbors of ``c`` that lie on the 64-bit plane, skipping any
    offset that would leave it on either axis
    """
    for dx, dy in NEIGHBOR_OFFSETS:
        x = c.x + dx
        y = c.y + dy
        if in_range(x) and in_range(y):
            yield Cell(x, y)


def count_living_neighbors(live: AbstractSet[Cell], c: Cell) -> int:
    """Return the number of ``c``'s neighbors that are in ``live``"""
    return sum(1 for n in neighbors(c) if n in live)


def dead_neighbors_of(live: AbstractSet[Cell], c: Cell) -> frozenset[Cell]:
    """Return the neighbors of ``c`` that are not in ``live``"""
    return frozenset(n for n in neighbors(c) if n not in live)


def all_dead_neighbors(live: AbstractSet[Cell]) -> frozenset[Cell]:
    """
    Return every dead cell adjacent to at least one cell of ``live``, i.e.,
    the only cells that are able to spawn in the next generation
    """
    pool: set[Cell] = set()
    for c in live:
        pool.update(dead_neighbors_of(live, c))
    return frozenset(pool)


def survivors(live: AbstractSet[Cell]) -> frozenset[Cell]:
    return frozenset(c for c in live if count_living_neighbors(live, c) in (2, 3))


def spawns(
    live: AbstractSet[Cell], candidates: Optional[AbstractSet[Cell]] = None
) -> frozenset[Cell]:
    """
    Return the dead cells with exactly three live neighbors.  ``candidates``,
    if given, must be ``all_dead_neighbors(live)``, already computed.
    """
    if candidates is None:
        candidates = all_dead_neighbors(live)
    return frozenset(c for c in candidates if count_living_neighbors(live, c) == 3)


def step(live: AbstractSet[Cell]) -> frozenset[Cell]:
    """
    Compute the generation after ``live``.  ``live`` itself is left untouched;
    both survivors and spawns are judged against it as it was on entry.
    """
    return survivors(live) | spawns(live)


@dataclass(frozen=True)
class Bounds:
    """The smallest rectangle containing every cell of a nonempty pattern"""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


def bounding_box(live: AbstractSet[Cell]) -> Optional[Bounds]:
    if not live:
        return None
    xs = [c.x for c in live]
    ys = [c.y for c in live]
    return Bounds(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))
