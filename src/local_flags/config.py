"""
local_flags/config.py
Lightweight global configuration read from the environment.
"""

from __future__ import annotations

import os
from pathlib import Path

# Working directory for SDP input and solution files
DATA_DIR = Path(os.getenv("LOCAL_FLAGS_DATA", "./data")).expanduser()

# Default logging level (see logging_setup.init_default_log)
LOG_LEVEL = os.getenv("LOCAL_FLAGS_LOG", "INFO")


def data_dir() -> Path:
    """Return DATA_DIR, creating it if needed."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR
