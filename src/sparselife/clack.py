"""
Click commands whose option defaults can be supplied by the configuration file

Each command declares which of its parameters may be set from the
``[options]`` table of the config file; `ConfigurableGroup.process_config()`
turns that table into a ``default_map`` for the command tree.
"""

from __future__ import annotations
import logging
from typing import Any
import click

log = logging.getLogger(__name__)


class ConfigurableCommand(click.Command):
    def __init__(
        self,
        allow_config: list[str] | None = None,
        disallow_config: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.allow_config = allow_config
        self.disallow_config = disallow_config

    def is_configurable(self, paramname: str) -> bool:
        return (self.allow_config is None or paramname in self.allow_config) and (
            self.disallow_config is None or paramname not in self.disallow_config
        )

    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg: dict[str, Any] = {}
        params = {p.name for p in self.params}
        for k, v in cfg.items():
            k = k.replace("-", "_")
            if k in params and self.is_configurable(k):
                out_cfg[k] = config_value(v)
            else:
                log.warning(
                    "Ignoring unsupported config option %r for %s", k, self.name
                )
        return out_cfg


class ConfigurableGroup(ConfigurableCommand, click.Group):
    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg = super().process_config(
            {k: v for k, v in cfg.items() if k not in self.commands}
        )
        for cmdname, cmdobj in self.commands.items():
            c = cfg.get(cmdname)
            if c is None or not isinstance(cmdobj, ConfigurableCommand):
                continue
            elif isinstance(c, dict):
                out_cfg[cmdname] = cmdobj.process_config(c)
            else:
                log.warning(
                    "Config entry for %r command is not a table; ignoring", cmdname
                )
        return out_cfg


def config_value(v: Any) -> str:
    # TOML booleans are spelled in lowercase so that click's BOOL type accepts
    # them the same way it accepts them on the command line
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)
