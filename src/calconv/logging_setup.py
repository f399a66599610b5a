from __future__ import annotations

import logging
from typing import Iterable, Union

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Plotting libraries log font/backend discovery at DEBUG
NOISY_LOGGERS: tuple[str, ...] = (
    "matplotlib",
    "matplotlib.font_manager",
    "PIL",
)

_configured = False  # guard against double-initialisation


def parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def setup_logging(
    *,
    level: Union[int, str] = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Configure root logging once. Call this from an entry point (the CLI does).

    Library modules never call this; they only use `logging.getLogger(__name__)`.
    """
    global _configured
    if _configured and not force:
        return

    lvl = parse_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(lvl)

    ch = logging.StreamHandler()
    ch.setLevel(lvl)
    ch.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    root.addHandler(ch)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("logging initialised (level=%s)", logging.getLevelName(lvl))


