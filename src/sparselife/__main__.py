import logging
import os
from pathlib import Path
import sys
from typing import Optional
import click
from click_loglevel import LogLevel
import colorlog
from . import __version__
from .clack import ConfigurableGroup
from .commands import inspect, run
from .config import DEFAULT_CFG, configure

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "bold",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def log_format(level: int) -> str:
    """
    Return the log record format for the given logging level.  At ``DEBUG``
    and below, records also show the name of the module that logged them.
    """
    if level <= logging.DEBUG:
        return "%(log_color)s[%(levelname)-8s] %(name)s: %(message)s"
    else:
        return "%(log_color)s[%(levelname)-8s] %(message)s"


@click.group(
    cls=ConfigurableGroup,
    allow_config=["log_level"],
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-c",
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CFG,
    show_default=True,
    help="Use the specified configuration file",
    callback=configure,
    is_eager=True,
    expose_value=False,
)
@click.option(
    "-C",
    "--chdir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Change directory before reading data.life",
    metavar="DIR",
)
@click.option(
    "-l",
    "--log-level",
    type=LogLevel(),
    default=logging.INFO,
    help="Set logging level  [default: INFO]",
)
@click.version_option(
    __version__,
    "-V",
    "--version",
    message="sparselife %(version)s",
)
def main(chdir: Optional[Path], log_level: int) -> None:
    """Run Conway's Game of Life on a sparse, unbounded plane"""
    if chdir is not None:
        os.chdir(chdir)
    # `run --trace` lowers the "sparselife" logger on its own, so the handler
    # is left at NOTSET and only the root logger is given the chosen level.
    colorlog.basicConfig(
        format=log_format(log_level),
        log_colors=LOG_COLORS,
        level=log_level,
        stream=sys.stderr,
    )


main.add_command(run.cli, "run")
main.add_command(inspect.cli, "inspect")

if __name__ == "__main__":
    main()
