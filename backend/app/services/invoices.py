"""Invoice lifecycle: creation, wholesale replacement, settlement and search."""

import math
from decimal import Decimal

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.logging import get_logger
from backend.app.core.time import as_invoice_datetime
from backend.app.models.invoice import Invoice
from backend.app.models.invoice_item import InvoiceItem
from backend.app.schemas.invoice import InvoiceWrite
from backend.app.services.billing import FILS, ZERO, coerce_amount, compute_invoice_totals
from backend.app.services.errors import InvoiceNumberAllocationError, InvoiceOperationError
from backend.app.services.numbering import allocate_next_invoice_number

logger = get_logger(__name__)

METADATA_FIELDS = (
    "customer_name",
    "bayan_no",
    "weight",
    "bl_awb",
    "quantity",
    "sea_air_land",
    "description",
    "receiver_name",
    "receiver_phone",
    "notes",
)


def _build_items(payload: InvoiceWrite) -> list[InvoiceItem]:
    return [
        InvoiceItem(
            description_en=item.description_en,
            description_ar=item.description_ar,
            amount=coerce_amount(item.amount),
            remarks=item.remarks or "",
            sort_order=index,
        )
        for index, item in enumerate(payload.items)
    ]


def _apply_payload(invoice: Invoice, payload: InvoiceWrite) -> None:
    totals = compute_invoice_totals(
        (item.amount for item in payload.items),
        paid=payload.paid,
        paid_status=payload.paid_status,
    )
    for field in METADATA_FIELDS:
        setattr(invoice, field, getattr(payload, field))
    invoice.total = totals.total
    invoice.paid = totals.paid
    invoice.balance = totals.balance
    invoice.paid_status = totals.paid_status


def create_invoice(db: Session, payload: InvoiceWrite) -> Invoice:
    """Create an invoice and its items under a freshly allocated number.

    Allocation, invoice and items share one transaction; on failure nothing is
    kept and the counter is not advanced.
    """
    try:
        number = allocate_next_invoice_number(db)
        invoice = Invoice(invoice_number=str(number), date=as_invoice_datetime(payload.date))
        _apply_payload(invoice, payload)
        invoice.items = _build_items(payload)
        db.add(invoice)
        db.commit()
    except InvoiceNumberAllocationError:
        db.rollback()
        logger.exception("Invoice number allocation failed")
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create invoice")
        raise InvoiceOperationError("Failed to create invoice") from exc
    db.refresh(invoice)
    logger.info("Created invoice %s for %s (total %s)", invoice.invoice_number, invoice.customer_name, invoice.total)
    return invoice


def replace_invoice(db: Session, invoice: Invoice, payload: InvoiceWrite) -> Invoice:
    """Replace an invoice's fields and items; the invoice number never changes."""
    try:
        if payload.date is not None:
            invoice.date = as_invoice_datetime(payload.date)
        _apply_payload(invoice, payload)
        invoice.items.clear()
        db.flush()
        invoice.items.extend(_build_items(payload))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update invoice %s", invoice.id)
        raise InvoiceOperationError("Failed to update invoice") from exc
    db.refresh(invoice)
    logger.info("Replaced invoice %s with %d items", invoice.invoice_number, len(invoice.items))
    return invoice


def mark_invoice_paid(db: Session, invoice: Invoice) -> Invoice:
    try:
        invoice.paid = Decimal(invoice.total or ZERO).quantize(FILS)
        invoice.balance = ZERO
        invoice.paid_status = "paid"
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to settle invoice %s", invoice.id)
        raise InvoiceOperationError("Failed to update invoice") from exc
    db.refresh(invoice)
    logger.info("Invoice %s marked as paid", invoice.invoice_number)
    return invoice


def delete_invoice(db: Session, invoice: Invoice) -> None:
    number = invoice.invoice_number
    try:
        db.delete(invoice)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete invoice %s", number)
        raise InvoiceOperationError("Failed to delete invoice") from exc
    logger.info("Deleted invoice %s", number)


def search_invoices(db: Session, search: str | None = None, page: int = 1, limit: int = 20):
    """Return (invoices, total, pages) newest first, optionally filtered by number, customer or bayan."""
    query = db.query(Invoice)
    if search:
        term = search.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{term}%"
        query = query.filter(
            or_(
                Invoice.invoice_number.ilike(pattern, escape="\\"),
                Invoice.customer_name.ilike(pattern, escape="\\"),
                Invoice.bayan_no.ilike(pattern, escape="\\"),
            )
        )
    total = query.count()
    invoices = (
        query.order_by(Invoice.created_at.desc(), Invoice.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    pages = math.ceil(total / limit) if limit else 0
    return invoices, total, pages


def get_invoice_summary(db: Session) -> dict:
    count, revenue, outstanding = db.query(
        func.count(Invoice.id),
        func.coalesce(func.sum(Invoice.total), 0),
        func.coalesce(func.sum(Invoice.balance), 0),
    ).one()
    return {
        "total_invoices": count,
        "total_revenue": str(coerce_amount(revenue)),
        "total_balance": str(coerce_amount(outstanding)),
    }
