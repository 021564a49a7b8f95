"""Contrato del servicio de VAT.

Por qué Protocol:
- La CLI depende de esta forma, no de httpx; los tests inyectan un doble
  que cumpla el contrato sin tocar la red.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class VatService(Protocol):
    """Las cinco operaciones remotas. Cada una devuelve el JSON ya parseado."""

    def validate_vat_number(self, vat_number: str) -> Any: ...

    def get_country_rates(self, country_code: str) -> Any: ...

    def get_all_country_rates(self) -> Any: ...

    def get_rates_by_ip(self, ip_address: str | None = None) -> Any: ...

    def calculate_vat(
        self,
        *,
        country_code: str | None = None,
        price: str | None = None,
        vat_rate: str | None = None,
    ) -> Any: ...

    def close(self) -> None: ...
