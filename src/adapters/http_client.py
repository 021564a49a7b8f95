"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, headers de autenticación, timeout y logging.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.logging import redact_mapping

logger = logging.getLogger(__name__)


def _log_request(request: httpx.Request) -> None:
    logger.debug(
        "-> %s %s headers=%s",
        request.method,
        request.url,
        redact_mapping(dict(request.headers)),
    )


def _log_response(response: httpx.Response) -> None:
    logger.debug("<- %s %s", response.status_code, response.request.url)


def build_client(
    api_key: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` autenticado contra la VAT API.

    La key se envía tal cual, aunque esté vacía: rechazarla es cosa del servidor.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "apikey": api_key,
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )
