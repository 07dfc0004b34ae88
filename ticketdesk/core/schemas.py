# ticketdesk/core/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field


class RecordOut(BaseModel):
    id: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}


class MessageOut(BaseModel):
    message: str
