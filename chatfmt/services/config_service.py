from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_FALSE_VALUES = {"0", "false", "False", "no", ""}


@dataclass
class RenderConfig:
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    smoke_check: bool = False

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.WARNING


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> RenderConfig:
    """Builds a RenderConfig from CHATFMT_* environment variables.

    Only the command line harness reads this; formatting itself takes no
    configuration.
    """
    env = os.environ if environ is None else environ
    encoding = env.get("CHATFMT_ENCODING", "").strip() or "utf-8"
    log_level = env.get("CHATFMT_LOG_LEVEL", "").strip() or "WARNING"
    smoke_check = env.get("CHATFMT_SMOKE_CHECK", "0").strip() not in _FALSE_VALUES
    return RenderConfig(encoding=encoding, log_level=log_level, smoke_check=smoke_check)
