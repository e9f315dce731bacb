"""Invoice line item schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class InvoiceItemBase(BaseModel):
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    remarks: Optional[str] = None


class InvoiceItemCreate(InvoiceItemBase):
    # Unparseable amounts are coerced to zero by the billing service
    amount: Decimal | float | str | None = None


class InvoiceItemRead(InvoiceItemBase):
    id: int
    amount: Decimal
    sort_order: int

    model_config = ConfigDict(from_attributes=True)
