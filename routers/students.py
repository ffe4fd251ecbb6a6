from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from database.store import InMemoryStore, get_store

router = APIRouter(prefix="/students", tags=["Students"])


def _student_out(s):
    return {**s.model_dump(), "full_name": s.full_name}


# ==========================================================
# [Step 1] read routes
# ==========================================================

# ✅ [READ] all students
@router.get("/")
def read_students(store: InMemoryStore = Depends(get_store)):
    records = store.directory.students.values()
    return {
        "success": True,
        "data": [_student_out(s) for s in records],
        "message": "All students loaded"
    }


# ✅ [SEARCH] students by name
@router.get("/search")
def search_students(name: Optional[str] = None, store: InMemoryStore = Depends(get_store)):
    results = list(store.directory.students.values())
    if name:
        results = [s for s in results if name.lower() in s.full_name.lower()]
    if not results:
        return {
            "success": False,
            "error": {"code": 404, "message": "No students match that name"}
        }
    return {
        "success": True,
        "data": [_student_out(s) for s in results],
        "message": f"{len(results)} student(s) found"
    }


# ==========================================================
# [Step 2] dynamic routes
# ==========================================================

# ✅ [READ] single student
@router.get("/{student_id}")
def read_student(student_id: str, store: InMemoryStore = Depends(get_store)):
    student = store.directory.get_student(student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return {
        "success": True,
        "data": _student_out(student),
        "message": f"Student {student_id} loaded"
    }
