"""
Runtime configuration.

Resolves which course file to load and sets up logging for the CLI.
Library modules only create loggers; configuring them happens here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

FILE_ENV_VAR = "COURSECATALOG_FILE"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def _default_data_path() -> Path:
    """
    Return the path of the course file bundled with the package.

    Using a function instead of a constant makes testing easier.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "courses.csv"


def resolve_data_path(
    explicit: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Pick the course file: explicit argument, then $COURSECATALOG_FILE,
    then the bundled data set.
    """
    if explicit:
        return Path(explicit)

    env = os.environ if environ is None else environ
    from_env = env.get(FILE_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env)

    return _default_data_path()


def resolve_log_level(verbose: bool = False, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    INFO when verbose, else $LOG_LEVEL. Unknown level names fall back to WARNING.
    """
    if verbose:
        return logging.INFO

    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(verbose: bool = False, environ: Optional[Mapping[str, str]] = None) -> None:
    level = resolve_log_level(verbose, environ)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
