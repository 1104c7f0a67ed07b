from __future__ import annotations
from collections.abc import Set as AbstractSet
from dataclasses import asdict, dataclass
from typing import Any, Optional
from .life import Bounds, Cell, all_dead_neighbors, bounding_box


@dataclass
class PatternInfo:
    #: Number of live cells
    population: int

    #: Bounding box of the live cells, or `None` if there are none
    bounds: Optional[Bounds]

    #: Number of dead cells bordering the pattern, i.e., the cells that could
    #: spawn in the next generation
    candidates: int

    @classmethod
    def inspect(cls, live: AbstractSet[Cell]) -> PatternInfo:
        return cls(
            population=len(live),
            bounds=bounding_box(live),
            candidates=len(all_dead_neighbors(live)),
        )

    def for_json(self) -> dict[str, Any]:
        data = asdict(self)
        if self.bounds is not None:
            data["bounds"]["width"] = self.bounds.width
            data["bounds"]["height"] = self.bounds.height
        return data
