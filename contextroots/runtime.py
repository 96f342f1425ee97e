from __future__ import annotations

from contextvars import ContextVar, Token
import os
import sys

_VERBOSE_LOGGING: ContextVar[bool | None] = ContextVar(
    "contextroots_verbose_logging", default=None
)

_TRUTHY = {"1", "true", "yes", "on"}


def _read_bool_env(name: str) -> bool:
    raw = (os.environ.get(name) or "").strip().lower()
    return raw in _TRUTHY


def get_verbose_logging() -> bool:
    value = _VERBOSE_LOGGING.get()
    if value is None:
        return _read_bool_env("CONTEXTROOTS_VERBOSE")
    return value


def set_verbose_logging(enabled: bool) -> Token[bool | None]:
    return _VERBOSE_LOGGING.set(bool(enabled))


def reset_verbose_logging(token: Token[bool | None]) -> None:
    _VERBOSE_LOGGING.reset(token)


def log(msg: str) -> None:
    if get_verbose_logging():
        print(msg, file=sys.stderr, flush=True)
