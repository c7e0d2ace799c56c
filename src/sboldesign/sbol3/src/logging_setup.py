"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/logging_setup.py

Rich console logging plus an optional plain-text log file.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure root logging for console + optional file.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    logfile : Optional[str]
        Path to a log file. Created if missing; always records DEBUG.
    """
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)

    # Clear old handlers (in case of re-entry)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    is_tty = bool(getattr(sys.stderr, "isatty", lambda: False)())
    console = Console(file=sys.stderr, force_terminal=is_tty, color_system="truecolor" if is_tty else None)
    sh = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    sh.setLevel(lvl)
    root.addHandler(sh)

    if logfile:
        Path(logfile).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    root.setLevel(logging.DEBUG if logfile else lvl)
    logging.getLogger(__name__).info("Logging initialized (level=%s)", level)


def setup_logging_from_config(cfg) -> None:
    """Apply a LoggingConfig (or an Sbol3Config carrying one)."""
    logging_cfg = getattr(cfg, "logging", cfg)
    setup_logging(level=logging_cfg.level, logfile=logging_cfg.logfile)
