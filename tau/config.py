from __future__ import annotations
import logging
import os

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_PROMPT = "user> "


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_log_level() -> int:
    name = os.environ.get("TAU_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    # host stack depth for non-tail recursion; tail calls never consume it
    return int_from_env("TAU_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT)


def get_prompt() -> str:
    return os.environ.get("TAU_PROMPT", _DEFAULT_PROMPT)
