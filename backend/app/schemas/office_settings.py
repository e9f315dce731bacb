from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OfficeSettingsBase(BaseModel):
    company_name: Optional[str] = None
    company_name_ar: Optional[str] = None
    owner_name: Optional[str] = None
    owner_name_ar: Optional[str] = None
    phone: Optional[str] = None
    logo_url: Optional[str] = None
    stamp_url: Optional[str] = None
    qr_base_url: Optional[str] = None


class OfficeSettingsRead(OfficeSettingsBase):
    model_config = ConfigDict(from_attributes=True)

    last_invoice_number: int
    show_qr_code: bool


class OfficeSettingsUpdate(OfficeSettingsBase):
    last_invoice_number: Optional[int] = Field(default=None, ge=1000)
    show_qr_code: Optional[bool] = None
