"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las respuestas de la API tienen forma variable; cada modelo declara qué
  campos son opcionales y tolera campos extra sin romper.
- Estos modelos solo se usan para proyectar informes legibles. El modo JSON
  imprime la respuesta cruda, sin pasar por aquí.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, Field
from pydantic.config import ConfigDict

# La API mezcla números y cadenas ("20", 20, 20.5); se conserva el valor recibido.
Number = Union[int, float, str]


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _to_scalar(value: Any) -> Any:
    if value is None or (isinstance(value, (int, float, str)) and not isinstance(value, bool)):
        return value
    return _to_text(value)


def _to_rate_list(value: Any) -> list[Any] | None:
    if value is None:
        return None
    items = value if isinstance(value, list) else [value]
    return [_to_scalar(item) for item in items if item is not None]


def _to_flag(value: Any) -> bool:
    return bool(value)


def _to_country(value: Any) -> Any:
    if value is None or isinstance(value, dict):
        return value
    return _to_text(value)


def _to_country_object(value: Any) -> Any:
    return value if isinstance(value, dict) else None


# Nada de validación local: cada campo se coacciona en vez de rechazar la respuesta.
Flag = Annotated[bool, BeforeValidator(_to_flag)]
Text = Annotated[Union[str, None], BeforeValidator(_to_text)]
Scalar = Annotated[Union[Number, None], BeforeValidator(_to_scalar)]
Rates = Annotated[Union[list[Number], None], BeforeValidator(_to_rate_list)]


class VatValidationResult(BaseModel):
    """Resultado de `/vat-number-check`."""

    model_config = ConfigDict(extra="allow")

    valid: Flag = Field(
        default=False,
        description="Whether the VAT number is registered and active.",
    )
    company_name: Text = Field(
        default=None,
        description="Registered company name, when disclosed.",
    )
    company_addr: Text = Field(
        default=None,
        description="Registered company address, when disclosed.",
    )
    country_code: Text = Field(
        default=None,
        description="ISO country code of the VAT registration.",
    )


class CountryRate(BaseModel):
    """VAT rates for one country."""

    model_config = ConfigDict(extra="allow")

    code: Text = Field(
        default=None,
        description="ISO country code.",
    )
    name: Text = Field(
        default=None,
        description="Country name.",
    )
    standard_rate: Scalar = Field(
        default=None,
        description="Standard VAT rate (percent).",
    )
    reduced_rates: Rates = Field(
        default=None,
        description="Reduced rates in the order returned by the API.",
    )
    super_reduced_rate: Scalar = Field(
        default=None,
        description="Super-reduced rate, if the country has one.",
    )
    parking_rate: Scalar = Field(
        default=None,
        description="Parking rate, if the country has one.",
    )


class CountryRatesResponse(BaseModel):
    """Envoltorio de `/country-code-check` (`{"country": {...}}`)."""

    model_config = ConfigDict(extra="allow")

    country: Annotated[Union[CountryRate, None], BeforeValidator(_to_country_object)] = None


class IpRateResult(BaseModel):
    """Resultado de `/ip-check`.

    `country` puede llegar como objeto (con nombre y tipos) o como cadena.
    """

    model_config = ConfigDict(extra="allow")

    ip: Text = None
    country: Annotated[Union[CountryRate, str, None], BeforeValidator(_to_country)] = None
    country_code: Text = None

    @property
    def country_name(self) -> str | None:
        if isinstance(self.country, CountryRate):
            return self.country.name
        return self.country or None

    @property
    def resolved_country_code(self) -> str | None:
        if self.country_code:
            return self.country_code
        if isinstance(self.country, CountryRate):
            return self.country.code
        return None

    @property
    def standard_rate(self) -> Number | None:
        if isinstance(self.country, CountryRate) and self.country.standard_rate is not None:
            return self.country.standard_rate
        return (self.model_extra or {}).get("standard_rate")


class VatCalculation(BaseModel):
    """Resultado de `/vat-calculator`; el cálculo lo hace siempre el servidor."""

    model_config = ConfigDict(extra="allow")

    price_excl_vat: Scalar = None
    vat: Scalar = None
    price_incl_vat: Scalar = None
    vat_rate: Scalar = None


def parse_payload(model: type[BaseModel], payload: Any) -> Any:
    """Valida `payload` contra `model`; cualquier cosa que no sea un objeto cuenta como vacío."""

    return model.model_validate(payload if isinstance(payload, dict) else {})
