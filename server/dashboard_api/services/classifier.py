"""Emotion classification via the Hugging Face inference API.

A thin pass-through: the journal text is posted to a hosted text classifier
and the highest-scoring emotion label is picked out of the response.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from mood_engine import normalize_label

from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


class ClassifierError(Exception):
    """The classification service failed or returned something unusable."""


class ModelLoadingError(ClassifierError):
    """The hosted model is cold-starting; the caller should retry later."""

    def __init__(self, estimated_time: float):
        super().__init__(f"Model is loading (estimated {estimated_time}s)")
        self.estimated_time = estimated_time


@dataclass
class ClassificationResult:
    """Top emotion picked from a classifier response."""

    label: Optional[str]
    score: Optional[float]
    raw: Any = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "score": self.score,
            "result": self.raw,
        }


def _candidates(result: Any) -> list[dict]:
    """Flatten the classifier output into a list of {label, score} dicts.

    The inference API wraps predictions per input, so a single text yields
    either ``[[{...}, ...]]`` or ``[{...}, ...]``.
    """
    if isinstance(result, dict):
        result = [result]
    if not isinstance(result, list):
        return []

    flat = []
    for item in result:
        if isinstance(item, list):
            flat.extend(i for i in item if isinstance(i, dict))
        elif isinstance(item, dict):
            flat.append(item)
    return [c for c in flat if "label" in c]


def parse_classification(result: Any) -> ClassificationResult:
    """Pick the highest-scoring recognized emotion from a raw response."""
    best_label = None
    best_score = None

    for candidate in _candidates(result):
        label = normalize_label(candidate.get("label"))
        if label is None:
            continue
        try:
            value = float(candidate.get("score"))
        except (TypeError, ValueError):
            value = None
        if best_label is None or (value is not None and (best_score is None or value > best_score)):
            best_label = label
            best_score = value

    return ClassificationResult(label=best_label, score=best_score, raw=result)


class MoodClassifier:
    """
    Client for the hosted emotion classifier.

    Args:
        settings: Application settings (defaults to environment settings)
        transport: Optional httpx transport, used to stub the API in tests
    """

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.settings.hf_api_key)

    async def classify(self, text: str) -> ClassificationResult:
        """
        Classify the emotional tone of a piece of text.

        Raises:
            ModelLoadingError: The model is still waking up.
            ClassifierError: Any other failure talking to the service.
        """
        if not self.configured:
            raise ClassifierError("Classifier API key is not configured")

        headers = {
            "Authorization": f"Bearer {self.settings.hf_api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.classifier_timeout),
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.settings.classifier_url,
                    json={"inputs": text},
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"[CLASSIFIER] Request failed: {e}")
            raise ClassifierError("Failed to connect to AI service") from e

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            logger.error(f"[CLASSIFIER] Non-JSON response ({response.status_code}): {response.text[:200]}")
            raise ClassifierError("AI Service returned an unexpected format.")

        try:
            result = response.json()
        except ValueError as e:
            raise ClassifierError("AI Service returned an unexpected format.") from e

        if isinstance(result, dict) and result.get("error"):
            error = str(result["error"])
            if "loading" in error.lower():
                try:
                    estimated = float(result.get("estimated_time"))
                except (TypeError, ValueError):
                    estimated = self.settings.model_loading_estimate
                if not estimated > 0:
                    estimated = self.settings.model_loading_estimate
                logger.info(f"[CLASSIFIER] Model loading, estimated {estimated}s")
                raise ModelLoadingError(estimated)
            logger.error(f"[CLASSIFIER] Service error: {error}")
            raise ClassifierError(error)

        classification = parse_classification(result)
        logger.debug(f"[CLASSIFIER] Classified text as {classification.label} ({classification.score})")
        return classification


def get_classifier() -> MoodClassifier:
    """FastAPI dependency returning a classifier bound to current settings."""
    return MoodClassifier()
