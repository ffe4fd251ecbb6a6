from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.store import InMemoryStore, get_store

router = APIRouter(prefix="/subjects", tags=["Subjects"])


# ✅ [READ] subjects, optionally for one grade level
@router.get("/")
def read_subjects(
    grade_level: Optional[str] = Query(None, description="Grade level, e.g. 10"),
    active_only: bool = False,
    store: InMemoryStore = Depends(get_store),
):
    subjects = store.directory.subjects
    if grade_level:
        subjects = [s for s in subjects if s.grade_level == grade_level]
    if active_only:
        subjects = [s for s in subjects if s.status == "active"]
    return {
        "success": True,
        "data": [s.model_dump() for s in subjects],
        "message": "Subjects loaded"
    }
