"""
Shredder Debugging Utilities

Timestamped trace lines on stderr, a timing decorator for the fill, and
runtime sanity checks. Tracing is silent until ``shredder --debug`` (or
``debug.enable()``) switches it on; checks are always active.
"""

import time
import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

DEBUG_ENABLED = False


def enable_debug(enable: bool = True) -> None:
    """Switch tracing on or off for the whole process."""
    global DEBUG_ENABLED
    DEBUG_ENABLED = enable


def debug_print(message: str, level: str = "INFO") -> None:
    """Write ``[HH:MM:SS.mmm] [LEVEL] message`` to stderr when tracing."""
    if DEBUG_ENABLED:
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        click.echo(f"[{timestamp}] [{level}] {message}", err=True)


def debug_exception(e: Exception, context: str = "") -> None:
    """Trace a handled per-file failure together with its traceback."""
    if DEBUG_ENABLED:
        debug_print(f"{context} failed: {type(e).__name__}: {e}", "ERROR")
        click.echo(traceback.format_exc().rstrip(), err=True)


def time_function(func: Callable) -> Callable:
    """Trace how long each call of ``func`` takes (PERF level)."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not DEBUG_ENABLED:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            debug_print(f"{func.__name__} took {time.perf_counter() - start:.6f}s", "PERF")

    return wrapper


def validate_assertion(condition: bool, message: str) -> None:
    """Fail loudly on a broken internal precondition."""
    if not condition:
        raise AssertionError(f"Validation failed: {message}")


class Debug:
    """Facade over the module functions, shared as ``debug``."""

    def print(self, message: str, level: str = "INFO") -> None:
        debug_print(message, level)

    def exception(self, e: Exception, context: str = "") -> None:
        debug_exception(e, context)

    def validate(self, condition: bool, message: str) -> None:
        validate_assertion(condition, message)

    def enable(self, enable: bool = True) -> None:
        enable_debug(enable)


debug = Debug()
