"""Invoice model for customs clearance billing."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(String(32), unique=True, index=True, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    customer_name = Column(String(255), nullable=False)

    total = Column(Numeric(12, 3), default=0, nullable=False)
    paid = Column(Numeric(12, 3), default=0, nullable=False)
    balance = Column(Numeric(12, 3), default=0, nullable=False)
    paid_status = Column(String(16), default="unpaid", nullable=False)

    # Shipping metadata printed on the invoice
    bayan_no = Column(String(64), nullable=True, index=True)
    weight = Column(String(64), nullable=True)
    bl_awb = Column(String(128), nullable=True)
    quantity = Column(String(64), nullable=True)
    sea_air_land = Column(String(32), nullable=True)
    description = Column(Text, nullable=True)
    receiver_name = Column(String(255), nullable=True)
    receiver_phone = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.sort_order",
    )
