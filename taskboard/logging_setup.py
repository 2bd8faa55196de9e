# taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys

_NOISY_LOGGERS = ("urllib3", "watchdog", "sqlalchemy.engine", "httpx", "httpcore")


def _level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), logging.INFO)


def setup_logging(*, level: int | str = logging.INFO) -> None:
    """
    Configure root logging for the store and the UI:
    - one stderr handler with a timestamped format
    - chatty third-party loggers only from WARNING up
    - warnings.warn(...) routed into logging as 'py.warnings'

    Safe to call more than once (Streamlit reruns the page script); existing
    handlers are replaced instead of stacked.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
