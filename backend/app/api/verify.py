"""Public verification of printed invoices."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.models.invoice import Invoice
from backend.app.models.office_settings import SINGLETON_ID, OfficeSettings
from backend.app.services.verification import build_verify_url, render_verification_page

router = APIRouter(prefix="/verify", tags=["verify"])


@router.get("/{invoice_number}", response_class=HTMLResponse)
async def verify_invoice(invoice_number: str, db: Session = Depends(get_db)):
    invoice = db.query(Invoice).filter(Invoice.invoice_number == invoice_number).first()
    settings_row = db.get(OfficeSettings, SINGLETON_ID)
    html = render_verification_page(invoice, settings_row, invoice_number)
    return HTMLResponse(content=html, status_code=200 if invoice else 404)


@router.get("/{invoice_number}/link")
async def get_verification_link(invoice_number: str, db: Session = Depends(get_db)):
    settings_row = db.get(OfficeSettings, SINGLETON_ID)
    show_qr_code = settings_row.show_qr_code if settings_row is not None else True
    return {"verify_url": build_verify_url(settings_row, invoice_number), "show_qr_code": show_qr_code}
