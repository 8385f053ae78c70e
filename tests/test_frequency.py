"""Tests for the monthly-equivalent frequency normalizer."""
import pytest

from household.models.enums import Frequency
from household.services.frequency import monthly_equivalent, parse_frequency


def test_yearly_is_divided_by_twelve():
    assert monthly_equivalent(1200, "yearly") == 100


def test_quarterly_is_divided_by_three():
    assert monthly_equivalent(300, "quarterly") == 100


def test_semi_annually_is_divided_by_six():
    assert monthly_equivalent(600, "semi-annually") == 100


def test_one_time_is_spread_over_twelve_months():
    assert monthly_equivalent(1200, "one-time") == 100


@pytest.mark.parametrize("amount", [0, 1, 19.99, 1234.56])
def test_monthly_passes_through(amount):
    assert monthly_equivalent(amount, "monthly") == amount


@pytest.mark.parametrize("amount", [0, 42, 99.5])
def test_unknown_frequency_passes_through(amount):
    assert monthly_equivalent(amount, "unknown") == amount


def test_unknown_frequency_is_logged(caplog):
    monthly_equivalent(10, "fortnightly")
    assert "fortnightly" in caplog.text


def test_accepts_enum_members():
    assert monthly_equivalent(90, Frequency.QUARTERLY) == 30


def test_no_rounding_inside_normalizer():
    assert monthly_equivalent(100, "quarterly") == pytest.approx(33.333333, rel=1e-6)


def test_legacy_german_labels():
    assert monthly_equivalent(1200, "jährlich") == 100
    assert monthly_equivalent(600, "halbjährlich") == 100
    assert parse_frequency("quartalsweise") is Frequency.QUARTERLY


def test_parse_unknown_returns_none():
    assert parse_frequency("weekly") is None
    assert parse_frequency(None) is None
