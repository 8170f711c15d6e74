from __future__ import annotations
import os
from typing import Optional


# Defaults
_DEFAULT_CELLS = 1024
_DEFAULT_VERBOSE_ERRORS = True

_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off'}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def get_cells(override: Optional[int] = None) -> int:
    """Arena size in 8-byte cells, shared by the symbol heap and the cell stack."""
    if override is not None:
        return override
    return int_from_env('TINYLISP_CELLS', _DEFAULT_CELLS)


def get_verbose_errors(override: Optional[bool] = None) -> bool:
    if override is not None:
        return override
    return flag_from_env('TINYLISP_VERBOSE_ERRORS', _DEFAULT_VERBOSE_ERRORS)
