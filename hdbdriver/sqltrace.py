"""SQL trace output of the driver."""

from __future__ import annotations

import logging
import sys
import threading
from itertools import pairwise
from typing import Any


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever sys.stdout is at the time of the record."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def _new_logger() -> logging.Logger:
    logger = logging.getLogger("hdbdriver.sqltrace")
    if not logger.handlers:
        handler = _StdoutHandler()
        handler.setFormatter(
            logging.Formatter(
                "hdb %(asctime)s %(filename)s:%(lineno)d: %(message)s",
                datefmt="%Y/%m/%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


_logger = _new_logger()
_on = threading.Event()


def is_on() -> bool:
    """True if SQL trace output is active."""
    return _on.is_set()


def set_on(on: bool) -> None:
    """Set SQL trace output active or inactive."""
    if on:
        _on.set()
    else:
        _on.clear()


def _sprint(args: tuple[Any, ...]) -> str:
    # Operands are separated by a space when neither of them is a string.
    if not args:
        return ""
    parts = [str(args[0])]
    for prev, cur in pairwise(args):
        if not isinstance(prev, str) and not isinstance(cur, str):
            parts.append(" ")
        parts.append(str(cur))
    return "".join(parts)


def trace(*args: Any) -> None:
    """Write the operands to the trace output."""
    _logger.info(_sprint(args), stacklevel=2)


def tracef(fmt: str, *args: Any) -> None:
    """Write a printf-style formatted message to the trace output."""
    _logger.info(fmt % args if args else fmt, stacklevel=2)


def traceln(*args: Any) -> None:
    """Write the operands, separated by spaces, to the trace output."""
    _logger.info(" ".join(str(a) for a in args), stacklevel=2)