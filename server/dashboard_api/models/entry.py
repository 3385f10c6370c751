"""Journal entry models."""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional


class DiaryEntryCreate(BaseModel):
    """Payload for writing a new journal entry."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    mood_label: Optional[str] = Field(default=None, alias="moodLabel")
    mood_confidence: Optional[float] = Field(default=None, ge=0, le=1, alias="moodConfidence")
    sleep_hours: Optional[float] = Field(default=None, ge=0, le=24, alias="sleepHours")
    life_balance: Optional[dict[str, float]] = Field(default=None, alias="lifeBalance")


class DiaryEntry(BaseModel):
    """Stored journal entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    user_id: Optional[str] = Field(default=None, serialization_alias="userId")
    timestamp: Optional[datetime] = None
    content: str = ""
    mood_label: Optional[str] = Field(default=None, serialization_alias="moodLabel")
    mood_confidence: Optional[float] = Field(default=None, serialization_alias="moodConfidence")
    sleep_hours: Optional[float] = Field(default=None, serialization_alias="sleepHours")
    life_balance: Optional[dict[str, Any]] = Field(default=None, serialization_alias="lifeBalance")
