"""Invoice routes for office staff."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.invoice import Invoice
from backend.app.models.user import User
from backend.app.schemas.invoice import (
    AmountInWords,
    InvoicePage,
    InvoiceRead,
    InvoiceSummary,
    InvoiceWrite,
    NextInvoiceNumber,
)
from backend.app.services.amount_words import amount_in_words
from backend.app.services.errors import InvoiceOperationError
from backend.app.services.invoices import (
    create_invoice,
    delete_invoice,
    get_invoice_summary,
    mark_invoice_paid,
    replace_invoice,
    search_invoices,
)
from backend.app.services.numbering import peek_next_invoice_number
from backend.app.services.service_catalog import list_service_templates

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _get_invoice(db: Session, invoice_id: int) -> Invoice:
    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
    if not invoice:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice


def _operation_failed(exc: InvoiceOperationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get("/next-number", response_model=NextInvoiceNumber)
async def get_next_invoice_number(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return {"next_number": peek_next_invoice_number(db)}


@router.get("/summary", response_model=InvoiceSummary)
async def get_summary(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_invoice_summary(db)


@router.get("/service-templates")
async def get_service_templates(current_user: User = Depends(get_current_user)):
    return list_service_templates()


@router.get("", response_model=InvoicePage)
async def list_invoices(
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=1000),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invoices, total, pages = search_invoices(db, search=search, page=page, limit=limit)
    return {"invoices": [InvoiceRead.model_validate(invoice) for invoice in invoices], "total": total, "pages": pages}


@router.post("", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
async def create_new_invoice(
    payload: InvoiceWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return create_invoice(db, payload)
    except InvoiceOperationError as exc:
        raise _operation_failed(exc)


@router.get("/{invoice_id}", response_model=InvoiceRead)
async def get_invoice(invoice_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return _get_invoice(db, invoice_id)


@router.put("/{invoice_id}", response_model=InvoiceRead)
async def update_invoice(
    invoice_id: int,
    payload: InvoiceWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invoice = _get_invoice(db, invoice_id)
    try:
        return replace_invoice(db, invoice, payload)
    except InvoiceOperationError as exc:
        raise _operation_failed(exc)


@router.post("/{invoice_id}/mark-paid", response_model=InvoiceRead)
async def settle_invoice(invoice_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    invoice = _get_invoice(db, invoice_id)
    try:
        return mark_invoice_paid(db, invoice)
    except InvoiceOperationError as exc:
        raise _operation_failed(exc)


@router.delete("/{invoice_id}")
async def remove_invoice(invoice_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    invoice = _get_invoice(db, invoice_id)
    try:
        delete_invoice(db, invoice)
    except InvoiceOperationError as exc:
        raise _operation_failed(exc)
    return {"status": "deleted", "id": invoice_id}


@router.get("/{invoice_id}/amount-in-words", response_model=AmountInWords)
async def get_amount_in_words(invoice_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    invoice = _get_invoice(db, invoice_id)
    return {"invoice_number": invoice.invoice_number, "total": invoice.total, **amount_in_words(invoice.total)}
