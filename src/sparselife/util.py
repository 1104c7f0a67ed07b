from __future__ import annotations
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, Optional
import click
from .lif106 import FormatError, load_cells, read_input_lines


def with_live_cells(func: Callable) -> Callable:
    """
    Decorate a command that takes an ``infile`` option so that it is instead
    passed the live cells loaded from that file (or from the default input
    source if it is unset).  Malformed input aborts the command.
    """

    @wraps(func)
    def wrapped(*args: Any, infile: Optional[Path] = None, **kwargs: Any) -> Any:
        try:
            cells = load_cells(read_input_lines(infile))
        except FormatError as e:
            raise click.ClickException(str(e))
        except UnicodeDecodeError as e:
            raise click.ClickException(f"Input is not valid UTF-8: {e}")
        return func(*args, cells=cells, **kwargs)

    return wrapped


infile_option = click.option(
    "-i",
    "--infile",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=(
        "Read the pattern from the given file"
        "  [default: data.life if present, else stdin]"
    ),
    metavar="FILE",
)
