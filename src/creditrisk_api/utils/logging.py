"""JSON log lines for the credit-risk service and CLI."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import Any

DEBUG_ENV_VAR = 'CREDITRISK_DEBUG'


def json_log(message: str, **extra: Any) -> str:
    """Return the JSON line for an event such as 'model.trained'; paths and numpy scalars are stringified."""
    payload = {'ts': time.time(), 'msg': message, **extra}
    return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger writing one JSON line per event to stdout.

    Serving routes and CLI commands share this logger setup. Setting
    CREDITRISK_DEBUG lowers the level to DEBUG.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)

    level = logging.DEBUG if os.getenv(DEBUG_ENV_VAR) else logging.INFO
    logger.setLevel(level)
    return logger
