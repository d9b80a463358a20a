"""Shell settings read from the process environment.

HEXCALC_* variables override the defaults below. load_settings() takes an
optional mapping so callers (and tests) can supply their own environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_PROMPT = "Enter an expression (or 'q' to quit): "
DEFAULT_HISTORY_FILE = "~/.hexcalc_history"
DEFAULT_HISTORY_LENGTH = 1000


@dataclass
class ShellSettings:
    """Configuration for one interactive session."""

    prompt: str = DEFAULT_PROMPT
    history_file: Optional[Path] = None
    history_length: int = DEFAULT_HISTORY_LENGTH
    verbose: bool = False


def _history_length(raw: Optional[str]) -> int:
    """Parse HEXCALC_HISTORY_LENGTH, falling back to the default on junk."""
    if raw is None:
        return DEFAULT_HISTORY_LENGTH
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_HISTORY_LENGTH


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    verbose: bool = False,
) -> ShellSettings:
    """Build ShellSettings from HEXCALC_* environment variables.

    Args:
        env: Environment mapping. Defaults to os.environ.
        verbose: Print token and postfix traces for each expression.
    """
    env = os.environ if env is None else env

    # Empty string disables history persistence
    history = env.get("HEXCALC_HISTORY_FILE", DEFAULT_HISTORY_FILE)
    history_file = Path(history).expanduser() if history else None

    return ShellSettings(
        prompt=env.get("HEXCALC_PROMPT", DEFAULT_PROMPT),
        history_file=history_file,
        history_length=_history_length(env.get("HEXCALC_HISTORY_LENGTH")),
        verbose=verbose,
    )
