from __future__ import annotations

from core.services.reports import (
    calculation_report,
    country_rates_report,
    extract_country_list,
    ip_rates_report,
    validation_report,
)


def _values(report) -> dict[str, str]:
    return {line.label: line.value for line in report.lines}


def test_validation_report_full_record_order() -> None:
    report = validation_report(
        {"valid": True, "company_name": "ACME LTD", "company_addr": "1 High St", "country_code": "GB"},
        "GB123456789",
    )

    assert report.title == "VAT Number Validation"
    assert report.labels() == ["VAT Number", "Valid", "Company", "Address", "Country"]
    assert _values(report)["Valid"] == "Yes"
    assert _values(report)["VAT Number"] == "GB123456789"


def test_validation_report_omits_absent_fields() -> None:
    report = validation_report({"valid": False}, "DE000")

    assert report.labels() == ["VAT Number", "Valid"]
    assert _values(report)["Valid"] == "No"


def test_country_report_falls_back_to_input_code() -> None:
    report = country_rates_report({}, "fr")

    assert report.title == "VAT Rates for FR"
    assert report.labels() == ["Country", "Standard Rate"]
    assert _values(report) == {"Country": "fr", "Standard Rate": "N/A"}


def test_country_report_lists_optional_rates() -> None:
    report = country_rates_report(
        {
            "country": {
                "name": "France",
                "standard_rate": 20,
                "reduced_rates": [10, 5.5],
                "super_reduced_rate": 2.1,
                "parking_rate": 0,
            }
        },
        "FR",
    )

    assert report.labels() == ["Country", "Standard Rate", "Reduced Rates", "Super Reduced", "Parking Rate"]
    values = _values(report)
    assert values["Standard Rate"] == "20%"
    assert values["Reduced Rates"] == "10, 5.5%"
    assert values["Super Reduced"] == "2.1%"
    assert values["Parking Rate"] == "0%"


def test_ip_report_fallbacks() -> None:
    report = ip_rates_report({}, None)

    assert _values(report) == {
        "IP Address": "auto-detected",
        "Country": "N/A",
        "Country Code": "N/A",
    }


def test_ip_report_prefers_response_values() -> None:
    report = ip_rates_report(
        {"ip": "81.2.69.160", "country_code": "GB", "country": {"name": "United Kingdom", "standard_rate": 20}},
        "10.0.0.1",
    )

    assert _values(report) == {
        "IP Address": "81.2.69.160",
        "Country": "United Kingdom",
        "Country Code": "GB",
        "Standard Rate": "20%",
    }


def test_ip_report_accepts_country_as_string_and_input_ip() -> None:
    report = ip_rates_report({"country": "Germany"}, "5.9.0.1")

    assert _values(report)["IP Address"] == "5.9.0.1"
    assert _values(report)["Country"] == "Germany"
    assert "Standard Rate" not in report.labels()


def test_calculation_report_fallbacks() -> None:
    report = calculation_report({}, "100")

    assert report.labels() == ["Price ex VAT", "VAT Amount", "Price inc VAT", "VAT Rate"]
    assert _values(report) == {
        "Price ex VAT": "100",
        "VAT Amount": "N/A",
        "Price inc VAT": "N/A",
        "VAT Rate": "N/A",
    }


def test_calculation_report_uses_server_figures() -> None:
    report = calculation_report(
        {"price_excl_vat": 100, "vat": 19, "price_incl_vat": 119, "vat_rate": 19},
        "100",
    )

    assert _values(report) == {
        "Price ex VAT": "100",
        "VAT Amount": "19",
        "Price inc VAT": "119",
        "VAT Rate": "19%",
    }


def test_extract_country_list_prefers_countries_then_rates() -> None:
    assert extract_country_list({"countries": [{"code": "AT"}], "rates": [{"code": "BE"}]}) == [{"code": "AT"}]
    assert extract_country_list({"rates": [{"code": "BE"}]}) == [{"code": "BE"}]
    assert extract_country_list({}) == []
    assert extract_country_list({"countries": {"AT": 20}}) == {"AT": 20}


def test_validation_report_treats_null_valid_as_no() -> None:
    report = validation_report({"valid": None, "company_name": "ACME"}, "GB1")

    assert _values(report)["Valid"] == "No"
    assert _values(report)["Company"] == "ACME"


def test_validation_report_stringifies_non_text_fields() -> None:
    report = validation_report({"valid": 1, "company_name": 12345, "company_addr": ["1 High St", "London"]}, "GB1")

    values = _values(report)
    assert values["Valid"] == "Yes"
    assert values["Company"] == "12345"
    assert values["Address"] == '["1 High St","London"]'


def test_country_report_accepts_scalar_reduced_rates() -> None:
    report = country_rates_report({"country": {"name": "Malta", "reduced_rates": "5"}}, "MT")

    assert _values(report)["Reduced Rates"] == "5%"


def test_country_report_ignores_non_object_country() -> None:
    report = country_rates_report({"country": "Germany"}, "de")

    assert _values(report) == {"Country": "de", "Standard Rate": "N/A"}


def test_ip_report_accepts_odd_country_shapes() -> None:
    report = ip_rates_report({"ip": 12, "country": ["GB"], "country_code": None}, None)

    values = _values(report)
    assert values["IP Address"] == "12"
    assert values["Country"] == '["GB"]'
    assert values["Country Code"] == "N/A"


def test_calculation_report_accepts_booleans_and_objects() -> None:
    report = calculation_report({"vat": True, "price_incl_vat": {"amount": 119}, "vat_rate": None}, "100")

    values = _values(report)
    assert values["VAT Amount"] == "true"
    assert values["Price inc VAT"] == '{"amount":119}'
    assert values["VAT Rate"] == "N/A"


def test_integral_float_rates_drop_trailing_zero() -> None:
    report = country_rates_report(
        {"country": {"name": "United Kingdom", "standard_rate": 20.0, "reduced_rates": [5.0, 7.5]}},
        "GB",
    )

    assert _values(report)["Standard Rate"] == "20%"
    assert _values(report)["Reduced Rates"] == "5, 7.5%"


def test_empty_countries_list_wins_over_rates() -> None:
    assert extract_country_list({"countries": [], "rates": [{"code": "BE"}]}) == []
