import json
import logging
import math

from amount_words import ZERO_WORD, speak

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "taka"


class InvoiceError(ValueError):
    pass


def _number(value, field):
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvoiceError(f"{field} must be a number, got {value!r}")
    if isinstance(value, str):
        # blank form fields count as zero
        if not value.strip():
            return 0.0
        try:
            value = float(value)
        except ValueError:
            raise InvoiceError(f"{field} must be a number, got {value!r}") from None
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise InvoiceError(f"{field} must be finite, got {value!r}")
    if value < 0:
        raise InvoiceError(f"{field} must not be negative, got {value!r}")
    return value


def amount_in_words_line(amount, currency=DEFAULT_CURRENCY):
    words = speak(amount)
    if words == ZERO_WORD:
        return f"Zero {currency} only"
    return f"{words} {currency} only"


class InvoiceItem:
    def __init__(self, description="", quantity=0, unit_price=0):
        self.description = description
        self.quantity = _number(quantity, "quantity")
        self.unit_price = _number(unit_price, "unit price")

    @property
    def total(self):
        return self.quantity * self.unit_price

    def __repr__(self):
        return (
            f"InvoiceItem(description={self.description!r}, "
            f"quantity={self.quantity}, unit_price={self.unit_price})"
        )


class Invoice:
    def __init__(
        self,
        items=(),
        vat_percentage=0,
        currency=DEFAULT_CURRENCY,
        invoice_number="",
        invoice_date="",
        due_date="",
        company_name="",
        buyer_company="",
    ):
        self.items = list(items)
        self.vat_percentage = _number(vat_percentage, "VAT percentage")
        self.currency = currency
        self.invoice_number = invoice_number
        self.invoice_date = invoice_date
        self.due_date = due_date
        self.company_name = company_name
        self.buyer_company = buyer_company

    def subtotal(self):
        return sum(item.total for item in self.items)

    def vat(self):
        return self.subtotal() * self.vat_percentage / 100

    def grand_total(self):
        return self.subtotal() + self.vat()

    def amount_in_words(self):
        return amount_in_words_line(self.grand_total(), self.currency)

    def summary(self):
        return {
            "invoice_number": self.invoice_number,
            "items": [
                {
                    "description": item.description,
                    "quantity": item.quantity,
                    "unit_price": f"{item.unit_price:.2f}",
                    "total": f"{item.total:.2f}",
                }
                for item in self.items
            ],
            "subtotal": f"{self.subtotal():.2f}",
            "vat_percentage": self.vat_percentage,
            "vat": f"{self.vat():.2f}",
            "grand_total": f"{self.grand_total():.2f}",
            "currency": self.currency,
            "amount_in_words": self.amount_in_words(),
        }


def invoice_from_dict(data, currency=None):
    """Build an :class:`Invoice` from the invoice form's JSON payload.

    Keys follow the form (``items``, ``vatPercentage``, ``invoiceNumber``,
    ``invoiceDate``, ``dueDate``, ``companyName``, ``buyerCompany``); each item
    carries ``description``, ``quantity`` and ``unitPrice``. ``currency``
    overrides a ``currency`` key in the payload.
    """
    if not isinstance(data, dict):
        raise InvoiceError(f"Invoice data must be an object, got {type(data).__name__}")
    raw_items = data.get("items", [])
    if not isinstance(raw_items, list):
        raise InvoiceError("Invoice items must be a list.")
    items = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            raise InvoiceError(f"Invoice item {index} must be an object.")
        try:
            items.append(
                InvoiceItem(
                    description=raw.get("description", ""),
                    quantity=raw.get("quantity", 0),
                    unit_price=raw.get("unitPrice", 0),
                )
            )
        except InvoiceError as exc:
            raise InvoiceError(f"Invoice item {index}: {exc}") from exc
    if currency is None:
        currency = data.get("currency", DEFAULT_CURRENCY)
    return Invoice(
        items=items,
        vat_percentage=data.get("vatPercentage", 0),
        currency=currency,
        invoice_number=data.get("invoiceNumber", ""),
        invoice_date=data.get("invoiceDate", ""),
        due_date=data.get("dueDate", ""),
        company_name=data.get("companyName", ""),
        buyer_company=data.get("buyerCompany", ""),
    )


def load_invoice(path, currency=None):
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise InvoiceError(f"Invoice file {path} is not valid JSON: {exc}") from exc
    invoice = invoice_from_dict(data, currency=currency)
    logger.debug("Loaded invoice %r with %d items from %s",
                 invoice.invoice_number, len(invoice.items), path)
    return invoice
