"""Editable copy for the public marketing site."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.models.website_content import WebsiteContent
from backend.app.schemas.website_content import WebsiteContentRead, WebsiteContentUpsert

router = APIRouter(prefix="/website-content", tags=["website-content"])


@router.get("")
async def get_website_content(db: Session = Depends(get_db)):
    rows = db.query(WebsiteContent).order_by(WebsiteContent.section, WebsiteContent.sort_order, WebsiteContent.id).all()
    content: dict[str, dict[str, str | None]] = {}
    for row in rows:
        content.setdefault(row.section, {})[row.key] = row.value
    return content


@router.put("", response_model=WebsiteContentRead)
async def upsert_website_content(
    payload: WebsiteContentUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    entry = (
        db.query(WebsiteContent)
        .filter(WebsiteContent.section == payload.section, WebsiteContent.key == payload.key)
        .first()
    )
    if entry is None:
        entry = WebsiteContent(section=payload.section, key=payload.key)
        db.add(entry)
    entry.value = payload.value
    entry.sort_order = payload.sort_order
    db.commit()
    db.refresh(entry)
    return entry
