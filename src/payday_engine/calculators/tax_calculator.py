"""Flat-rate withholding with won truncation."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

TRUNCATION_UNIT = Decimal("10")


class TaxCalculator:
    """Calculates withholding as a flat percentage of pre-tax pay.

    Withholding is always truncated down to the nearest multiple of
    TRUNCATION_UNIT won; it is never rounded up.
    """

    @staticmethod
    def truncate(amount: Decimal, unit: Decimal = TRUNCATION_UNIT) -> Decimal:
        """Floor an amount to a multiple of unit."""
        return (amount / unit).to_integral_value(rounding=ROUND_FLOOR) * unit

    @staticmethod
    def calculate_withholding(total_before_tax: Decimal, tax_rate: Decimal) -> Decimal:
        """Withholding for the given pre-tax total and percentage rate.

        Args:
            total_before_tax: Gross pay including holiday allowance
            tax_rate: Percentage, e.g. Decimal("3.3")

        Returns:
            Withholding floored to the truncation unit
        """
        raw = total_before_tax * tax_rate / 100
        return TaxCalculator.truncate(raw)
