"""Public invoice verification: the URL printed as a QR code and the page it opens."""

import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from backend.app.core.settings import get_settings
from backend.app.models.invoice import Invoice
from backend.app.models.office_settings import OfficeSettings
from backend.app.services.amount_words import amount_in_words
from backend.app.services.numbering import DEFAULT_OFFICE_SETTINGS

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


def kwd(value) -> str:
    return f"{float(value or 0):,.3f}"


env.filters["kwd"] = kwd


def build_verify_url(settings_row: OfficeSettings | None, invoice_number: str) -> str:
    base_url = settings_row.qr_base_url if settings_row and settings_row.qr_base_url else None
    if not base_url:
        base_url = f"{get_settings().public_base_url}/verify"
    return f"{base_url.rstrip('/')}/{invoice_number}"


def _office_context(settings_row: OfficeSettings | None) -> dict:
    context = dict(DEFAULT_OFFICE_SETTINGS)
    if settings_row is not None:
        for field in ("company_name", "company_name_ar", "owner_name", "owner_name_ar", "phone"):
            value = getattr(settings_row, field)
            if value:
                context[field] = value
    return context


def render_verification_page(invoice: Invoice | None, settings_row: OfficeSettings | None, invoice_number: str) -> str:
    office = _office_context(settings_row)
    if invoice is None:
        return env.get_template("verify_not_found.html").render(invoice_number=invoice_number, office=office)
    return env.get_template("verify.html").render(
        invoice=invoice,
        items=invoice.items,
        office=office,
        words=amount_in_words(invoice.total),
    )
