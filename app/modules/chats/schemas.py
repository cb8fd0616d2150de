from pydantic import BaseModel, Field
from typing import List


class ChatLinkCreate(BaseModel):
    chat_id: str = Field(..., min_length=1)


class ChatIdsResponse(BaseModel):
    chat_ids: List[str]
