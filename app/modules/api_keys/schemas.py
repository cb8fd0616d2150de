from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ApiKeyStore(BaseModel):
    api_key: str = Field(..., min_length=1)


class ApiKeyStatus(BaseModel):
    provider: str
    configured: bool
    hint: Optional[str] = None  # last characters of the plaintext, for display
    updated_at: Optional[datetime] = None
