from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime, timezone
from typing import List, Optional


class MessageCreate(BaseModel):
    # Both fields are checked by the room service so a missing value is a
    # 400 "Invalid input" rather than a schema error
    username: Optional[str] = None
    message: Optional[str] = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    text: str
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset; stored timestamps are always UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class MessageCreatedResponse(BaseModel):
    success: bool = True
    message: MessageResponse


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]
