"""Salida JSON estructurada.

Por qué JSON:
- Interoperabilidad con `jq` y pipelines: la respuesta se emite tal cual,
  sin filtrar campos y con una indentación estable.
"""

from __future__ import annotations

import json
from typing import Any


def to_json_text(payload: Any) -> str:
    """Serializa `payload` con 2 espacios, conservando el orden de la API."""

    return json.dumps(payload, ensure_ascii=False, indent=2)
