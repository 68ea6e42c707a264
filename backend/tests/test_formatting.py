"""Tests for display formatting helpers."""

from datetime import date

from app.services.formatting import format_currency, format_date, format_pct, entry_note


class TestFormatCurrency:

    def test_thousands_separator(self):
        assert format_currency(123_456_700) == "Rp 1.234.567"

    def test_drops_minor_units(self):
        """Cents are floored away."""
        assert format_currency(199) == "Rp 1"

    def test_small_amount(self):
        assert format_currency(50_000) == "Rp 500"

    def test_negative_shown_as_zero(self):
        assert format_currency(-10_000) == "Rp 0"


class TestFormatDate:

    def test_short_month(self):
        assert format_date(date(2024, 1, 5)) == "5 Jan 2024"

    def test_indonesian_month(self):
        assert format_date(date(2024, 8, 17)) == "17 Agu 2024"
        assert format_date(date(2024, 12, 25)) == "25 Des 2024"


def test_format_pct():
    assert format_pct(30.0) == "30%"
    assert format_pct(100.0) == "100%"


def test_entry_note_default():
    assert entry_note(None) == "Setoran tabungan"
    assert entry_note("Bonus") == "Bonus"


def test_format_pct_rounds_halves_away_from_zero():
    assert format_pct(12.5) == "13%"
    assert format_pct(0.5) == "1%"
    assert format_pct(2.5) == "3%"
    assert format_pct(-12.5) == "-13%"
    assert format_pct(12.4) == "12%"
