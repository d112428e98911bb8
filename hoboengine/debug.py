"""Console logging with a sticky error flag."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Union

_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass
class _CrashState:
    crashed: bool = False


_STATE = _CrashState()


def _format(value: Union[str, float]) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def log(value: Union[str, float]) -> None:
    """Print an informational line."""
    print(f"[LOG] {_format(value)}", file=sys.stdout, flush=True)


def log_error(value: Union[str, float]) -> None:
    """Print an error line in red and mark the process as crashed."""
    _STATE.crashed = True
    print(f"{_RED}[ERROR] {_format(value)}{_RESET}", file=sys.stdout, flush=True)


def has_crashed() -> bool:
    """Return True once any error has been logged."""
    return _STATE.crashed


def reset_crash() -> None:
    """Clear the error flag."""
    _STATE.crashed = False