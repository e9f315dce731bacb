from typing import Optional

from pydantic import BaseModel, ConfigDict


class WebsiteContentUpsert(BaseModel):
    section: str
    key: str
    value: Optional[str] = None
    sort_order: int = 0


class WebsiteContentRead(WebsiteContentUpsert):
    model_config = ConfigDict(from_attributes=True)

    id: int
