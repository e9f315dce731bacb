"""Sequential invoice numbers backed by the office settings row."""

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.logging import get_logger
from backend.app.models.office_settings import DEFAULT_LAST_INVOICE_NUMBER, SINGLETON_ID, OfficeSettings
from backend.app.services.errors import InvoiceNumberAllocationError

logger = get_logger(__name__)

DEFAULT_OFFICE_SETTINGS = {
    "company_name": "Muharram Rakan Al-Ajmi Customs Clearance Office",
    "company_name_ar": "مكتب محرم راكان العجمي للتخليص الجمركي",
    "owner_name": "Mohd. hassan Mohd. Abd. Haq",
    "owner_name_ar": "محمد حسن محمد عبدالحق",
    "phone": "60744492",
    "show_qr_code": True,
}


def get_or_create_office_settings(db: Session) -> OfficeSettings:
    """Return the settings row, adding it to the current transaction if missing.

    The row is flushed, not committed, so the caller's commit or rollback decides
    whether it is kept.
    """
    settings_row = db.get(OfficeSettings, SINGLETON_ID)
    if settings_row is not None:
        return settings_row
    settings_row = OfficeSettings(
        id=SINGLETON_ID,
        last_invoice_number=DEFAULT_LAST_INVOICE_NUMBER,
        **DEFAULT_OFFICE_SETTINGS,
    )
    db.add(settings_row)
    db.flush()
    logger.info("Created office settings with invoice counter at %s", DEFAULT_LAST_INVOICE_NUMBER)
    return settings_row


def peek_next_invoice_number(db: Session) -> int:
    """Number the next invoice would receive; nothing is reserved."""
    last = db.execute(
        select(OfficeSettings.last_invoice_number).where(OfficeSettings.id == SINGLETON_ID)
    ).scalar_one_or_none()
    return (last or DEFAULT_LAST_INVOICE_NUMBER) + 1


def allocate_next_invoice_number(db: Session) -> int:
    """Advance the counter in the database and return the new value.

    The increment is a single UPDATE evaluated by the database, so two
    transactions can never read the same previous value. The caller owns the
    transaction: the number is only consumed once it commits.
    """
    try:
        settings_row = get_or_create_office_settings(db)
        result = db.execute(
            update(OfficeSettings)
            .where(OfficeSettings.id == SINGLETON_ID)
            .values(
                last_invoice_number=func.coalesce(func.nullif(OfficeSettings.last_invoice_number, 0), DEFAULT_LAST_INVOICE_NUMBER) + 1
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise InvoiceNumberAllocationError("Office settings row could not be updated")
        number = db.execute(
            select(OfficeSettings.last_invoice_number).where(OfficeSettings.id == SINGLETON_ID)
        ).scalar_one()
    except SQLAlchemyError as exc:
        raise InvoiceNumberAllocationError("Could not allocate an invoice number") from exc

    # Keep the identity map in step with the UPDATE issued above
    db.expire(settings_row, ["last_invoice_number"])
    logger.debug("Allocated invoice number %s", number)
    return number
