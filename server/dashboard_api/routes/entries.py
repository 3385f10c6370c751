"""Journal entry API routes."""
from fastapi import APIRouter, Depends, HTTPException, Query

from ..models.entry import DiaryEntry, DiaryEntryCreate
from ..database import EntryStore, get_entry_store

router = APIRouter(prefix="/api/journal", tags=["Journal Entries"])


@router.post("/entries", response_model=DiaryEntry, status_code=201)
async def create_entry(
    payload: DiaryEntryCreate,
    user_id: str = Query(..., min_length=1, description="Owner of the entry"),
    store: EntryStore = Depends(get_entry_store),
):
    """Write a new journal entry and notify dashboard subscribers."""
    if payload.life_balance:
        out_of_range = [k for k, v in payload.life_balance.items() if not 0 <= v <= 10]
        if out_of_range:
            raise HTTPException(
                status_code=400,
                detail=f"Life balance ratings must be between 0 and 10: {out_of_range}",
            )

    entry = store.add_entry(
        user_id=user_id,
        content=payload.content,
        created_at=payload.created_at,
        mood_label=payload.mood_label,
        mood_confidence=payload.mood_confidence,
        sleep_hours=payload.sleep_hours,
        life_balance=payload.life_balance,
    )
    return DiaryEntry.model_validate(entry)


@router.get("/entries", response_model=list[DiaryEntry])
async def list_entries(
    user_id: str = Query(..., min_length=1, description="Owner of the entries"),
    limit: int | None = Query(default=None, ge=1, le=1000, description="Maximum entries to return"),
    store: EntryStore = Depends(get_entry_store),
):
    """Get a user's journal entries, newest first."""
    return [DiaryEntry.model_validate(e) for e in store.list_entries(user_id, limit=limit)]


@router.delete("/entries/{entry_id}", status_code=204)
async def delete_entry(
    entry_id: str,
    user_id: str = Query(..., min_length=1, description="Owner of the entry"),
    store: EntryStore = Depends(get_entry_store),
):
    """Delete one of the user's journal entries."""
    if not store.delete_entry(user_id, entry_id):
        raise HTTPException(status_code=404, detail=f"Entry '{entry_id}' not found")
