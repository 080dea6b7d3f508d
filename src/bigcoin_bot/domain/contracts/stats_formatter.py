"""Protocol for formatting stat values."""

from typing import Protocol


class StatsFormatterProtocol(Protocol):
    """Protocol for turning metric values into channel label values."""

    def format_price(self, value: float) -> str:
        """Format a price as en-US currency with four fraction digits.

        Args:
            value: The price to format.

        Returns:
            Formatted price like "$1,234.5000".
        """
        ...

    def format_compact(self, value: float | None) -> str:
        """Format a number in short compact notation.

        Args:
            value: The number to format, or None.

        Returns:
            Compact string like "1.23M", or "0" if value is None.
        """
        ...
