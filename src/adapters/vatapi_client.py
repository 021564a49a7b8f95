"""Cliente de la VAT API (https://vatapi.com/v1).

Cada operación es un GET con sus query params; la respuesta JSON se devuelve
sin tocar. Los fallos de transporte/HTTP se normalizan a `core.errors`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.errors import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConnectivityError,
    NotFoundError,
    RateLimitError,
    VatApiCliError,
)
from core.interfaces.vat_service import VatService

logger = logging.getLogger(__name__)

# Sent but never answered. Failures before sending (bad scheme, proxy, invalid
# request) propagate unchanged.
_NO_RESPONSE_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)

_STATUS_ERRORS: dict[int, type[VatApiCliError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    429: RateLimitError,
}


def api_error_message(response: httpx.Response) -> str:
    """`message`, luego `error`, luego el cuerpo entero como texto."""

    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value, separators=(",", ":"))
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def error_from_response(response: httpx.Response) -> VatApiCliError:
    error_cls = _STATUS_ERRORS.get(response.status_code)
    if error_cls is not None:
        return error_cls()
    return ApiError(response.status_code, api_error_message(response))


class VatApiClient(VatService):
    """Cliente síncrono: una petición por comando."""

    def __init__(
        self,
        api_key: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = build_client(api_key, self._settings, transport=transport)

    def __enter__(self) -> "VatApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        try:
            response = self._client.get(path, params=params or None)
        except _NO_RESPONSE_ERRORS as exc:
            logger.debug("Transport failure on %s: %s", path, exc)
            raise ConnectivityError() from exc
        if not response.is_success:
            raise error_from_response(response)
        try:
            return response.json()
        except ValueError:
            logger.debug("Non-JSON body from %s; returning it as text", path)
            return response.text

    def validate_vat_number(self, vat_number: str) -> Any:
        return self._get("/vat-number-check", {"vatid": vat_number})

    def get_country_rates(self, country_code: str) -> Any:
        return self._get("/country-code-check", {"code": country_code})

    def get_all_country_rates(self) -> Any:
        return self._get("/country-rates")

    def get_rates_by_ip(self, ip_address: str | None = None) -> Any:
        params: dict[str, str] = {}
        if ip_address:
            params["address"] = ip_address
        return self._get("/ip-check", params)

    def calculate_vat(
        self,
        *,
        country_code: str | None = None,
        price: str | None = None,
        vat_rate: str | None = None,
    ) -> Any:
        params: dict[str, str] = {}
        if country_code:
            params["code"] = country_code
        if price:
            params["price"] = price
        if vat_rate:
            params["rate"] = vat_rate
        return self._get("/vat-calculator", params)
