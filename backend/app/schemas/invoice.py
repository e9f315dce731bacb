"""Invoice schemas."""

from datetime import date as date_type, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.invoice_item import InvoiceItemCreate, InvoiceItemRead

PaidStatus = Literal["unpaid", "partial", "paid"]


class InvoiceBase(BaseModel):
    customer_name: str
    bayan_no: Optional[str] = None
    weight: Optional[str] = None
    bl_awb: Optional[str] = None
    quantity: Optional[str] = None
    sea_air_land: Optional[str] = None
    description: Optional[str] = None
    receiver_name: Optional[str] = None
    receiver_phone: Optional[str] = None
    notes: Optional[str] = None


class InvoiceWrite(InvoiceBase):
    """Payload for creating an invoice or replacing one wholesale."""

    date: Optional[date_type | datetime] = None
    paid: Decimal | float | str | None = None
    paid_status: Optional[PaidStatus | Literal[""]] = None
    items: List[InvoiceItemCreate] = Field(default_factory=list)


class InvoiceRead(InvoiceBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_number: str
    date: datetime
    total: Decimal
    paid: Decimal
    balance: Decimal
    paid_status: PaidStatus
    items: List[InvoiceItemRead] = []

    created_at: datetime
    updated_at: datetime


class InvoicePage(BaseModel):
    invoices: List[InvoiceRead]
    total: int
    pages: int


class InvoiceSummary(BaseModel):
    total_invoices: int
    total_revenue: str
    total_balance: str


class NextInvoiceNumber(BaseModel):
    next_number: int


class AmountInWords(BaseModel):
    invoice_number: str
    total: Decimal
    english_words: str
    arabic_words: str
