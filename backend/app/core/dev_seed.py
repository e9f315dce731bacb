import os

from sqlalchemy.orm import Session

from backend.app.core.logging import get_logger
from backend.app.core.security import get_password_hash
from backend.app.core.settings import get_settings
from backend.app.models.user import User
from backend.app.services.numbering import get_or_create_office_settings

logger = get_logger(__name__)


def ensure_default_admin(db: Session) -> None:
    """
    Create the default admin account and the office settings row on first run.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    settings = get_settings()
    existing = db.query(User).filter(User.username == settings.default_admin_username).first()
    if existing is None:
        db.add(
            User(
                username=settings.default_admin_username,
                hashed_password=get_password_hash(settings.default_admin_password),
                name="Administrator",
                is_active=True,
            )
        )
        logger.info("Default admin user %s created", settings.default_admin_username)

    get_or_create_office_settings(db)
    db.commit()
