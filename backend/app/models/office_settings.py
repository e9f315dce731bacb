"""Office settings: the single row holding company display fields and the invoice counter."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base

SINGLETON_ID = 1
DEFAULT_LAST_INVOICE_NUMBER = 1000


class OfficeSettings(Base):
    __tablename__ = "office_settings"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    company_name = Column(String(255), nullable=True)
    company_name_ar = Column(String(255), nullable=True)
    owner_name = Column(String(255), nullable=True)
    owner_name_ar = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    last_invoice_number = Column(Integer, nullable=False, default=DEFAULT_LAST_INVOICE_NUMBER)
    logo_url = Column(String(512), nullable=True)
    stamp_url = Column(String(512), nullable=True)
    show_qr_code = Column(Boolean, nullable=False, default=True)
    qr_base_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
