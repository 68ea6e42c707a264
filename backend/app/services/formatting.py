"""Display formatting for amounts, dates and percentages (id-ID)."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

# Short month names as rendered by the id-ID locale
MONTHS_SHORT = [
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
]

DEFAULT_ENTRY_NOTE = "Setoran tabungan"


def format_currency(cents: int) -> str:
    """Whole rupiah with dot thousands separators, e.g. 'Rp 1.250.000'."""
    rupiah = max(0, cents // 100)
    return f"Rp {rupiah:,}".replace(",", ".")


def format_date(value: date) -> str:
    return f"{value.day} {MONTHS_SHORT[value.month - 1]} {value.year}"


def format_pct(pct: float) -> str:
    """Whole percent, halves rounded away from zero."""
    rounded = Decimal(pct).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def entry_note(note: Optional[str]) -> str:
    return note if note is not None else DEFAULT_ENTRY_NOTE
