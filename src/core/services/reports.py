"""Response-to-display projections.

Each builder takes the raw JSON payload returned by the API plus whatever the
user typed, and returns an ordered `Report`. Fallback chains live here, not in
the rendering code, so they can be tested without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from core.domain.models import (
    CountryRate,
    CountryRatesResponse,
    IpRateResult,
    VatCalculation,
    VatValidationResult,
    parse_payload,
)

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ReportLine:
    label: str
    value: str
    style: str | None = None


@dataclass
class Report:
    """Single-record output: a title and labeled lines in a fixed order."""

    title: str
    lines: list[ReportLine] = field(default_factory=list)

    def add(self, label: str, value: str, style: str | None = None) -> None:
        self.lines.append(ReportLine(label=label, value=value, style=style))

    def labels(self) -> list[str]:
        return [line.label for line in self.lines]


@dataclass(frozen=True)
class Column:
    """Column descriptor for tabular output."""

    key: str
    label: str
    formatter: Callable[[Any, Mapping[str, Any]], str] | None = None

    def cell(self, row: Mapping[str, Any]) -> str:
        value = row.get(self.key)
        if self.formatter is not None:
            return str(self.formatter(value, row))
        return format_value(value)


def is_present(value: Any) -> bool:
    """A field counts as present unless it is missing, null or empty."""

    return value is not None and value != "" and value != []


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def percent(value: Any) -> str:
    return f"{format_value(value)}%"


def first_present(*values: Any, default: str = NOT_AVAILABLE) -> Any:
    for value in values:
        if is_present(value):
            return value
    return default


def validation_report(payload: Any, vat_number: str) -> Report:
    result: VatValidationResult = parse_payload(VatValidationResult, payload)
    report = Report(title="VAT Number Validation")
    report.add("VAT Number", vat_number, "cyan")
    if result.valid:
        report.add("Valid", "Yes", "green")
    else:
        report.add("Valid", "No", "red")
    if is_present(result.company_name):
        report.add("Company", str(result.company_name), "bold")
    if is_present(result.company_addr):
        report.add("Address", str(result.company_addr))
    if is_present(result.country_code):
        report.add("Country", str(result.country_code))
    return report


def country_rates_report(payload: Any, country_code: str) -> Report:
    response: CountryRatesResponse = parse_payload(CountryRatesResponse, payload)
    country = response.country or CountryRate()
    report = Report(title=f"VAT Rates for {country_code.upper()}")
    report.add("Country", format_value(first_present(country.name, default=country_code)))
    if is_present(country.standard_rate):
        report.add("Standard Rate", percent(country.standard_rate), "green")
    else:
        report.add("Standard Rate", NOT_AVAILABLE)
    if is_present(country.reduced_rates):
        rates = ", ".join(format_value(rate) for rate in country.reduced_rates or [])
        report.add("Reduced Rates", f"{rates}%")
    if is_present(country.super_reduced_rate):
        report.add("Super Reduced", percent(country.super_reduced_rate))
    if is_present(country.parking_rate):
        report.add("Parking Rate", percent(country.parking_rate))
    return report


def ip_rates_report(payload: Any, ip_address: str | None) -> Report:
    result: IpRateResult = parse_payload(IpRateResult, payload)
    report = Report(title="VAT Rates by IP")
    report.add("IP Address", format_value(first_present(result.ip, ip_address, default="auto-detected")))
    report.add("Country", format_value(first_present(result.country_name)))
    report.add("Country Code", format_value(first_present(result.resolved_country_code)))
    if is_present(result.standard_rate):
        report.add("Standard Rate", percent(result.standard_rate), "green")
    return report


def calculation_report(payload: Any, price: str) -> Report:
    result: VatCalculation = parse_payload(VatCalculation, payload)
    report = Report(title="VAT Calculation")
    report.add("Price ex VAT", format_value(first_present(result.price_excl_vat, default=price)))
    report.add("VAT Amount", format_value(first_present(result.vat)), "yellow")
    report.add("Price inc VAT", format_value(first_present(result.price_incl_vat)), "green")
    if is_present(result.vat_rate):
        report.add("VAT Rate", percent(result.vat_rate))
    else:
        report.add("VAT Rate", NOT_AVAILABLE)
    return report


def _reduced_rates_cell(value: Any, row: Mapping[str, Any]) -> str:
    if isinstance(value, list):
        return ", ".join(format_value(v) for v in value)
    return format_value(value) if is_present(value) else NOT_AVAILABLE


COUNTRY_RATE_COLUMNS: Sequence[Column] = (
    Column(key="code", label="Code"),
    Column(key="name", label="Country"),
    Column(key="standard_rate", label="Standard %"),
    Column(key="reduced_rates", label="Reduced %", formatter=_reduced_rates_cell),
)


def extract_country_list(payload: Any) -> Any:
    """Pick the country sequence out of `/country-rates` (`countries`, then `rates`).

    Returns whatever was found; callers check that it is a list.
    """

    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return None
    # An empty list still counts as an answer: `{"countries": []}` means no results.
    for key in ("countries", "rates"):
        value = payload.get(key)
        if value or isinstance(value, (list, dict)):
            return value
    return []
