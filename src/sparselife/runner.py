from __future__ import annotations
from collections.abc import Callable, Iterator
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional
from .life import (
    Cell,
    all_dead_neighbors,
    count_living_neighbors,
    spawns,
    survivors,
)

log = logging.getLogger(__name__)

DEFAULT_GENERATIONS = 10


class Phase(Enum):
    INITIAL = "Initial cells"
    SURVIVORS = "Survivors"
    CANDIDATES = "Neighbor dead cells"
    SPAWNS = "Spawning cells"
    MERGED = "Merged state"
    FINAL = "End of iterations"


@dataclass(frozen=True)
class TraceEvent:
    #: The 1-based generation being computed (for `Phase.FINAL`, the number of
    #: generations that were run)
    generation: int

    phase: Phase

    #: The cells produced by the phase
    cells: frozenset[Cell]

    #: The generation the phase was computed from
    snapshot: frozenset[Cell]


Observer = Callable[[TraceEvent], None]


@dataclass
class Runner:
    """
    Steps a pattern a fixed number of generations.  There is no early exit:
    still lifes, oscillators, and empty patterns are all stepped the full
    count.

    If ``observer`` is set, it is called after each phase of each generation
    and once more after the last generation.
    """

    generations: int = DEFAULT_GENERATIONS
    observer: Optional[Observer] = None

    def __post_init__(self) -> None:
        if self.generations < 0:
            raise ValueError(
                f"Number of generations must be nonnegative: {self.generations}"
            )

    def iterate(
        self, initial: AbstractSet[Cell]
    ) -> Iterator[tuple[int, frozenset[Cell]]]:
        cells = frozenset(initial)
        for gen in range(1, self.generations + 1):
            self.notify(gen, Phase.INITIAL, cells, cells)
            surviving = survivors(cells)
            self.notify(gen, Phase.SURVIVORS, surviving, cells)
            candidates = all_dead_neighbors(cells)
            self.notify(gen, Phase.CANDIDATES, candidates, cells)
            spawning = spawns(cells, candidates)
            self.notify(gen, Phase.SPAWNS, spawning, cells)
            merged = surviving | spawning
            self.notify(gen, Phase.MERGED, merged, cells)
            log.debug(
                "Generation %d: %d survived, %d spawned",
                gen,
                len(surviving),
                len(spawning),
            )
            cells = merged
            yield (gen, cells)
        self.notify(self.generations, Phase.FINAL, cells, cells)

    def run(self, initial: AbstractSet[Cell]) -> frozenset[Cell]:
        cells = frozenset(initial)
        for _, cells in self.iterate(initial):
            pass
        return cells

    def notify(
        self,
        generation: int,
        phase: Phase,
        cells: frozenset[Cell],
        snapshot: frozenset[Cell],
    ) -> None:
        if self.observer is not None:
            self.observer(
                TraceEvent(
                    generation=generation,
                    phase=phase,
                    cells=cells,
                    snapshot=snapshot,
                )
            )


def log_trace(event: TraceEvent) -> None:
    """
    Observer that logs every phase at DEBUG level, listing each cell along
    with the number of its neighbors that belong to the same phase
    """
    if event.phase is Phase.FINAL:
        log.debug("%s", event.phase.value)
        return
    if event.phase is Phase.INITIAL:
        log.debug("Iteration: %d", event.generation)
    log.debug("    %s", event.phase.value)
    for c in sorted(event.cells):
        log.debug(
            "        Cell: %s -> Living Neighbors: %d",
            c,
            count_living_neighbors(event.cells, c),
        )
