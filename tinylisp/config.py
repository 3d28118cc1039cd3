from __future__ import annotations
import os

# Defaults
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_PROMPT = "> "


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Nesting limit for evaluate(); TINYLISP_MAX_DEPTH overrides it."""
    return int_from_env('TINYLISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    return os.environ.get('TINYLISP_PROMPT', _DEFAULT_PROMPT)
