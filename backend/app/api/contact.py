"""Public contact form and the staff inbox behind it."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.logging import get_logger
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.contact_message import ContactMessage
from backend.app.models.user import User
from backend.app.schemas.contact_message import (
    ContactMessageCreate,
    ContactMessageRead,
    ContactMessageStatusUpdate,
)

router = APIRouter(prefix="/contact", tags=["contact"])
logger = get_logger(__name__)


def _get_message(db: Session, message_id: int) -> ContactMessage:
    message = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
    if not message:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact_message(payload: ContactMessageCreate, db: Session = Depends(get_db)):
    message = ContactMessage(
        name=payload.name,
        email=payload.email,
        phone=payload.phone or "",
        message=payload.message,
        status="new",
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info("Contact message %s received from %s", message.id, message.email)
    return {"id": message.id, "success": True}


@router.get("", response_model=list[ContactMessageRead])
async def list_contact_messages(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return db.query(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()


@router.put("/{message_id}", response_model=ContactMessageRead)
async def update_contact_message(
    message_id: int,
    payload: ContactMessageStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    message = _get_message(db, message_id)
    message.status = payload.status
    db.commit()
    db.refresh(message)
    return message


@router.delete("/{message_id}")
async def delete_contact_message(message_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    message = _get_message(db, message_id)
    db.delete(message)
    db.commit()
    return {"status": "deleted", "id": message_id}
