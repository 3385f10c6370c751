"""Mood analytics API routes.

Each request loads the user's current entry snapshot and recomputes the
requested view with the aggregation engine. Nothing is cached.
"""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from mood_engine import (
    build_dashboard,
    bucket,
    distribute,
    life_balance,
    mood_timeline,
    sleep_mood,
    suggestions,
    summary_stats,
    top_emotions,
    trend,
    year_heatmap,
)

from ..config import get_settings
from ..database import EntryStore, get_entry_store
from ..models.analytics import (
    DashboardResponse,
    DistributionSliceResponse,
    EmotionCountResponse,
    LifeBalanceAreaResponse,
    MoodTimelineResponse,
    SleepMoodPointResponse,
    StatSummaryResponse,
    SuggestionResponse,
    TrendPointResponse,
)

router = APIRouter(prefix="/api/journal/analytics", tags=["Mood Analytics"])


def _dashboard(store: EntryStore, user_id: str, today: date | None, entries=None):
    settings = get_settings()
    return build_dashboard(
        entries if entries is not None else store.list_entries(user_id),
        today=today,
        trend_days=settings.trend_window_days,
        sleep_days=settings.sleep_window_days,
        top_limit=settings.top_emotions_limit,
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    today: date | None = Query(default=None, description="Reference day, defaults to the local date"),
    store: EntryStore = Depends(get_entry_store),
):
    """
    Get every analytics view for the user's journal.
    Combines stats, trend, distribution, top emotions, heatmap,
    life balance, sleep vs. mood and suggestions.
    """
    return DashboardResponse.model_validate(_dashboard(store, user_id, today))


@router.get("/trend", response_model=list[TrendPointResponse])
async def get_mood_trend(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    days: int = Query(default=30, ge=1, le=366, description="Number of days in the window"),
    today: date | None = Query(default=None, description="Reference day, defaults to the local date"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get the daily mean mood score; days without entries have a null mean."""
    points = trend(bucket(store.list_entries(user_id), days, today))
    return [TrendPointResponse.model_validate(p) for p in points]


@router.get("/distribution", response_model=list[DistributionSliceResponse])
async def get_mood_distribution(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get the share of each mood label among labeled entries."""
    return [DistributionSliceResponse.model_validate(s) for s in distribute(store.list_entries(user_id))]


@router.get("/stats", response_model=StatSummaryResponse)
async def get_stats(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    today: date | None = Query(default=None, description="Reference day, defaults to the local date"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get streak, total check-ins, average mood and most common mood."""
    return StatSummaryResponse.model_validate(summary_stats(store.list_entries(user_id), today))


@router.get("/heatmap", response_model=dict[str, int])
async def get_heatmap(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    today: date | None = Query(default=None, description="Reference day, defaults to the local date"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get entry counts per day from January 1st to today."""
    return year_heatmap(store.list_entries(user_id), today)


@router.get("/top-emotions", response_model=list[EmotionCountResponse])
async def get_top_emotions(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    limit: int = Query(default=7, ge=1, le=7, description="Number of emotions to return"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get the most frequent emotions, most frequent first."""
    return [EmotionCountResponse.model_validate(e) for e in top_emotions(store.list_entries(user_id), limit)]


@router.get("/life-balance", response_model=list[LifeBalanceAreaResponse])
async def get_life_balance(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get the average self-rating per life area."""
    return [LifeBalanceAreaResponse.model_validate(a) for a in life_balance(store.list_entries(user_id))]


@router.get("/sleep-mood", response_model=list[SleepMoodPointResponse])
async def get_sleep_mood(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    days: int = Query(default=14, ge=1, le=90, description="Number of days in the window"),
    today: date | None = Query(default=None, description="Reference day, defaults to the local date"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get sleep hours and mood score per day."""
    points = sleep_mood(store.list_entries(user_id), days, today)
    return [SleepMoodPointResponse.model_validate(p) for p in points]


@router.get("/timeline", response_model=MoodTimelineResponse)
async def get_mood_timeline(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    days: int = Query(default=7, description="Time range: 7 or 30 days"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get per-entry mood points with a wellness tip for the latest mood."""
    if days not in (7, 30):
        raise HTTPException(status_code=400, detail="days must be 7 or 30")
    return MoodTimelineResponse.model_validate(mood_timeline(store.list_entries(user_id), days))


@router.get("/suggestions", response_model=list[SuggestionResponse])
async def get_suggestions(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get up to three wellness suggestions from recent mood and sleep."""
    entries = store.list_entries(user_id)
    stats = summary_stats(entries)
    return [SuggestionResponse.model_validate(s) for s in suggestions(entries, stats.average_mood)]


@router.get("/stream")
async def stream_dashboard(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    store: EntryStore = Depends(get_entry_store),
):
    """
    Stream the recomputed dashboard via Server-Sent Events (SSE).

    Sends the current dashboard on connect, then one ``dashboard`` event
    each time the user's entries change. The stream never closes; clients
    should handle reconnection.

    Usage with curl:
        curl -N "http://localhost:8082/api/journal/analytics/stream?user_id=demo"
    """
    async def event_generator():
        async for snapshot in store.feed.stream(user_id, initial=store.list_entries(user_id)):
            dashboard = DashboardResponse.model_validate(_dashboard(store, user_id, None, snapshot))
            yield f"event: dashboard\ndata: {dashboard.model_dump_json(by_alias=True)}\n\n"

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        }
    )
