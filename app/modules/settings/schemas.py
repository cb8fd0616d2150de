from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserSettingUpdate(BaseModel):
    value: str


class UserSettingResponse(BaseModel):
    name: str
    value: str
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
