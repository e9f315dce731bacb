"""Office settings shown on printed invoices and the public site."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.logging import get_logger
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.office_settings import OfficeSettingsRead, OfficeSettingsUpdate
from backend.app.services.numbering import get_or_create_office_settings

router = APIRouter(prefix="/settings", tags=["settings"])
logger = get_logger(__name__)


@router.get("", response_model=OfficeSettingsRead)
async def get_office_settings(db: Session = Depends(get_db)):
    settings_row = get_or_create_office_settings(db)
    db.commit()
    return settings_row


@router.put("", response_model=OfficeSettingsRead)
async def update_office_settings(
    payload: OfficeSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    settings_row = get_or_create_office_settings(db)
    update_data = payload.model_dump(exclude_unset=True)
    new_counter = update_data.get("last_invoice_number")
    if new_counter is not None and new_counter < settings_row.last_invoice_number:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invoice counter cannot be moved below the last issued number",
        )
    for field, value in update_data.items():
        if value is None and field in ("last_invoice_number", "show_qr_code"):
            continue
        setattr(settings_row, field, value)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update office settings")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update settings")
    db.refresh(settings_row)
    logger.info("Office settings updated by %s: %s", current_user.username, ", ".join(sorted(update_data)))
    return settings_row
