"""Invoice line item model."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    description_en = Column(String(255), nullable=True)
    description_ar = Column(String(255), nullable=True)
    amount = Column(Numeric(12, 3), nullable=False, default=0)
    remarks = Column(Text, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)

    invoice = relationship("Invoice", back_populates="items")
