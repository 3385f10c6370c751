"""Mood classification API routes.

Proxies journal text to the hosted emotion classifier so the API key never
reaches the browser.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..models.mood import MoodAnalysisRequest, MoodAnalysisResponse
from ..services.classifier import (
    ClassifierError,
    ModelLoadingError,
    MoodClassifier,
    get_classifier,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/mood", tags=["Mood Classification"])


@router.post("/analyze", response_model=MoodAnalysisResponse)
async def analyze_mood(
    payload: MoodAnalysisRequest,
    classifier: MoodClassifier = Depends(get_classifier),
):
    """
    Classify the emotional tone of a journal entry.

    Returns the top emotion label and confidence along with the raw
    classifier output. Answers 503 with an estimated wait while the hosted
    model is cold-starting.
    """
    text = payload.text
    if not isinstance(text, str) or not text.strip():
        raise HTTPException(status_code=400, detail="No text provided or invalid format")

    if not classifier.configured:
        logger.error("[CLASSIFIER] Missing Hugging Face API key (MINDSYNC_HF_API_KEY)")
        raise HTTPException(status_code=500, detail="Server configuration error")

    try:
        result = await classifier.classify(text)
    except ModelLoadingError as e:
        return JSONResponse(
            status_code=503,
            content={
                "error": "Model is waking up",
                "estimated_time": e.estimated_time,
                "isLoading": True,
            },
        )
    except ClassifierError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return MoodAnalysisResponse(**result.to_dict())
