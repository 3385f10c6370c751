"""Mood classification request/response models."""
from pydantic import BaseModel
from typing import Any, Optional


class MoodAnalysisRequest(BaseModel):
    """Text to classify. Validated by the route so bad input maps to 400."""

    text: Any = None


class MoodAnalysisResponse(BaseModel):
    """Top emotion for the submitted text plus the raw classifier output."""

    label: Optional[str] = None
    score: Optional[float] = None
    result: Any = None
