"""Formatter for stat channel values, following en-US number formatting."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from bigcoin_bot.domain.contracts.stats_formatter import StatsFormatterProtocol

PRICE_QUANTUM = Decimal("0.0001")
COMPACT_QUANTUM = Decimal("0.01")
# Digits kept beyond the integer part when quantizing
PRECISION_MARGIN = 8
# Largest unit first; values beyond trillions keep the "T" suffix (e.g. "1000T")
COMPACT_UNITS = (
    (Decimal(10) ** 12, "T"),
    (Decimal(10) ** 9, "B"),
    (Decimal(10) ** 6, "M"),
    (Decimal(10) ** 3, "K"),
)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-∞" if value < 0 else "∞"


def _precision_for(number: Decimal) -> int:
    return max(28, number.adjusted() + PRECISION_MARGIN)


def _strip_zeros(value: Decimal) -> str:
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class StatsFormatter(StatsFormatterProtocol):
    """Formats prices as currency and block counts in compact notation."""

    def format_price(self, value: float) -> str:
        """Format a price like "$1,234.5000"."""
        if not math.isfinite(value):
            return f"${_non_finite(value)}"
        number = Decimal(str(value))
        with localcontext() as ctx:
            ctx.prec = _precision_for(number)
            amount = abs(number).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
        sign = "-" if number < 0 and amount else ""
        return f"{sign}${amount:,.4f}"

    def format_compact(self, value: float | None) -> str:
        """Format a number like "1.23M"; None becomes "0"."""
        if value is None:
            return "0"
        if not math.isfinite(value):
            return _non_finite(value)

        number = Decimal(str(value))
        sign = "-" if number < 0 else ""
        magnitude = abs(number)

        with localcontext() as ctx:
            ctx.prec = _precision_for(magnitude)
            scaled = magnitude.quantize(COMPACT_QUANTUM, rounding=ROUND_HALF_UP)
            suffix = ""
            # Move up one unit while the rounded value reaches 1000 ("999.999K" becomes "1M")
            for divisor, unit in reversed(COMPACT_UNITS):
                if scaled < 1000:
                    break
                scaled = (magnitude / divisor).quantize(COMPACT_QUANTUM, rounding=ROUND_HALF_UP)
                suffix = unit

        text = _strip_zeros(scaled)
        if text == "0":
            return "0"
        return f"{sign}{text}{suffix}"
