"""Logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Iterable, Mapping

_REDACT_KEYS = {"apikey", "authorization", "cookie"}


def redact_mapping(values: Mapping[str, Any], extra_keys: Iterable[str] = ()) -> Dict[str, Any]:
    """Return a shallow copy of `values` with sensitive keys redacted."""

    keys = _REDACT_KEYS | {k.lower() for k in extra_keys}
    redacted: Dict[str, Any] = {}
    for key, value in values.items():
        redacted[key] = "***" if key.lower() in keys else value
    return redacted


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the root logger."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=numeric,
    )
    # httpx/httpcore are chatty at DEBUG; our own hooks already log each call.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(numeric, logging.INFO))
