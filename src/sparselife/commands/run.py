import logging
import sys
from typing import Optional
import click
from ..clack import ConfigurableCommand
from ..lif106 import write_cells
from ..life import Cell
from ..runner import DEFAULT_GENERATIONS, Observer, Runner, log_trace
from ..util import infile_option, with_live_cells


@click.command(cls=ConfigurableCommand, allow_config=["generations", "sort"])
@infile_option
@click.option(
    "-n",
    "--generations",
    type=click.IntRange(min=0),
    default=DEFAULT_GENERATIONS,
    show_default=True,
    help="Number of generations to advance",
)
@click.option(
    "--sort/--no-sort",
    default=True,
    help="Sort output cells by coordinate  [default: true]",
)
@click.option(
    "--trace",
    is_flag=True,
    default=False,
    help="Log every cell of every phase of every generation",
)
@with_live_cells
def cli(cells: frozenset[Cell], generations: int, sort: bool, trace: bool) -> None:
    """Advance a pattern and print the cells left alive"""
    observer: Optional[Observer]
    if trace:
        logging.getLogger("sparselife").setLevel(logging.DEBUG)
        observer = log_trace
    else:
        observer = None
    final = Runner(generations=generations, observer=observer).run(cells)
    write_cells(final, sys.stdout, sort=sort)
