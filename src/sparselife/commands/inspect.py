import json
import click
from ..inspecting import PatternInfo
from ..life import Cell
from ..util import infile_option, with_live_cells


@click.command()
@infile_option
@with_live_cells
def cli(cells: frozenset[Cell]) -> None:
    """Summarize a pattern as JSON"""
    info = PatternInfo.inspect(cells)
    click.echo(json.dumps(info.for_json(), indent=4, sort_keys=True))
