"""API route modules."""
from .entries import router as entries_router
from .analytics import router as analytics_router
from .mood import router as mood_router

__all__ = [
    "entries_router",
    "analytics_router",
    "mood_router",
]
