"""Locale-style number formatting for reports.

Numbers are grouped with a dot and use a comma as the decimal separator
(``1234567.891`` → ``"1.234.567,89"``), matching the way tariffs and bills
are written on the input side.
"""

from __future__ import annotations


def format_number(
    value: float | None,
    decimals: int = 0,
    thousands_sep: str = ".",
    decimal_sep: str = ",",
) -> str:
    """Format *value* with the given grouping and decimal separators.

    ``None`` renders as ``"-"``.
    """
    if value is None:
        return "-"
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands_sep)


def format_currency(value: float, symbol: str = "Rp", decimals: int = 0) -> str:
    return f"{symbol} {format_number(value, decimals)}"
