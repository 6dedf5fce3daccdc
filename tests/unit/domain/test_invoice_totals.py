"""Unit tests for the invoice totals engine"""

import pytest
from decimal import Decimal
from types import SimpleNamespace
from src.domain.invoice_totals import InvoiceTotalsError, price_item, recompute_totals


def item(description="Design work", quantity="1", rate="0"):
    return SimpleNamespace(description=description, quantity=quantity, rate=rate)


class TestRecomputeTotals:
    def test_worked_example(self):
        """2 x 50, discount 10, tax 10%, shipping 5"""
        totals = recompute_totals(
            [item(quantity="2", rate="50")],
            discount="10",
            tax_rate="10",
            shipping="5",
        )

        assert totals.items[0].amount == Decimal("100")
        assert totals.subtotal == Decimal("100")
        assert totals.after_discount == Decimal("90")
        assert totals.tax == Decimal("9")
        assert totals.total_amount == Decimal("104")

    def test_subtotal_sums_line_amounts(self):
        totals = recompute_totals([
            item("Design", "1.5", "40"),
            item("Hosting", "3", "9.99"),
        ])

        assert [i.amount for i in totals.items] == [Decimal("60.0"), Decimal("29.97")]
        assert totals.subtotal == Decimal("89.97")
        assert totals.total_amount == Decimal("89.97")

    def test_no_items(self):
        totals = recompute_totals([], shipping="5")

        assert totals.subtotal == Decimal("0")
        assert totals.total_amount == Decimal("5")

    def test_discount_larger_than_subtotal_gives_negative_total(self):
        totals = recompute_totals([item(quantity="1", rate="20")], discount="50", tax_rate="10")

        assert totals.after_discount == Decimal("-30")
        assert totals.tax == Decimal("-3")
        assert totals.total_amount == Decimal("-33")

    def test_tax_rounds_half_up_to_storage_scale(self):
        totals = recompute_totals([item(quantity="1", rate="0.0000125")], tax_rate="20")

        assert totals.items[0].amount == Decimal("0.000013")
        assert totals.tax == Decimal("0.000003")

    def test_total_equals_sum_of_components(self):
        totals = recompute_totals(
            [item(quantity="3", rate="33.333333")],
            discount="0.5",
            tax_rate="7.25",
            shipping="4.2",
        )

        assert totals.total_amount == totals.after_discount + totals.tax + totals.shipping

    def test_floats_are_read_through_their_repr(self):
        totals = recompute_totals([item(quantity=0.1, rate=3)])

        assert totals.subtotal == Decimal("0.3")


class TestInvalidInput:
    @pytest.mark.parametrize("field", ["quantity", "rate"])
    def test_negative_item_values_rejected(self, field):
        values = {"quantity": "1", "rate": "1", field: "-1"}
        with pytest.raises(InvoiceTotalsError):
            recompute_totals([item(**values)])

    @pytest.mark.parametrize("adjustment", ["discount", "tax_rate", "shipping"])
    def test_negative_adjustments_rejected(self, adjustment):
        with pytest.raises(InvoiceTotalsError):
            recompute_totals([item()], **{adjustment: "-0.01"})

    @pytest.mark.parametrize("value", ["abc", None, "NaN", "Infinity"])
    def test_non_numeric_values_rejected(self, value):
        with pytest.raises(InvoiceTotalsError):
            price_item("Design", value, "1")

    @pytest.mark.parametrize("description", ["", "   ", None])
    def test_blank_description_rejected(self, description):
        with pytest.raises(InvoiceTotalsError):
            price_item(description, "1", "1")

    def test_error_is_a_value_error(self):
        assert issubclass(InvoiceTotalsError, ValueError)
