"""Invoice totals and expected cash inflows."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import INVOICE_STATUS_SENT
from src.domain.models import Invoice, InvoiceRow
from src.domain.services.periods import as_naive_utc
from src.utils.decimal_utils import coerce_decimal


def invoice_total(rows: Iterable[InvoiceRow]) -> Decimal:
    """Return the invoice total excluding VAT."""
    return sum(
        (
            coerce_decimal(row.quantity) * coerce_decimal(row.unit_price)
            for row in rows
        ),
        Decimal("0"),
    )


def invoice_total_with_vat(rows: Iterable[InvoiceRow]) -> Decimal:
    """Return the invoice total including VAT."""
    total = Decimal("0")
    for row in rows:
        line_total = coerce_decimal(row.quantity) * coerce_decimal(
            row.unit_price
        )
        total += line_total + line_total * coerce_decimal(row.vat_rate) / 100
    return total


def expected_invoice_inflows(
    invoices: Iterable[Invoice],
) -> dict[tuple[int, int], Decimal]:
    """Group unpaid sent invoices by the month they are due.

    Args:
        invoices: Company invoices; only SENT ones with a due date count.

    Returns:
        dict[tuple[int, int], Decimal]: VAT-inclusive totals keyed by
        (year, month).
    """
    inflows: dict[tuple[int, int], Decimal] = {}
    for invoice in invoices:
        if invoice.status != INVOICE_STATUS_SENT or invoice.due_date is None:
            continue
        due = as_naive_utc(invoice.due_date)
        key = (due.year, due.month)
        inflows[key] = inflows.get(key, Decimal("0")) + invoice_total_with_vat(
            invoice.rows
        )
    return inflows


__all__ = [
    "invoice_total",
    "invoice_total_with_vat",
    "expected_invoice_inflows",
]
