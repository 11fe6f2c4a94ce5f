from __future__ import annotations
import logging
import os

_DEFAULT_LOGLEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10_000


def get_log_level() -> int:
    """Logging level named by LISPLET_LOGLEVEL, WARNING if unset or unknown."""
    raw = os.environ.get("LISPLET_LOGLEVEL", _DEFAULT_LOGLEVEL).strip().upper()
    level = getattr(logging, raw, None)
    if isinstance(level, int):
        return level
    return getattr(logging, _DEFAULT_LOGLEVEL)


def get_recursion_limit() -> int:
    """Host recursion limit used while evaluating, from LISPLET_RECURSION_LIMIT."""
    raw = os.environ.get("LISPLET_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def configure_logging() -> None:
    """Opt-in root logging setup for host programs."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
