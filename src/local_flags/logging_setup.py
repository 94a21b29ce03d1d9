"""
local_flags/logging_setup.py
Basic logging configuration: call init_default_log() at program entry.
"""

import logging
import sys

from local_flags.config import LOG_LEVEL


def init_default_log(level: str | None = None) -> None:
    lvl = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        stream=sys.stdout,
    )
