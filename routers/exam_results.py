from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from database.store import InMemoryStore, get_store
from schemas.assessments import Term
from schemas.exams import ExamResult, ExamResultCreate

router = APIRouter(prefix="/exam-results", tags=["Exam results"])


def generate_exam_result_id(store: InMemoryStore) -> str:
    return f"EXR{len(store.exam_results) + 1:03d}"


# ✅ [CREATE] record an exam score (out of 100)
# a second result for the same student/subject/term is kept, reports read the first one
@router.post("/")
def create_exam_result(result: ExamResultCreate, store: InMemoryStore = Depends(get_store)):
    record = ExamResult(
        id=generate_exam_result_id(store),
        entered_at=datetime.now(timezone.utc),
        **result.model_dump(),
    )
    store.exam_results.append(record)
    return {
        "success": True,
        "data": record.model_dump(mode="json"),
        "message": "Exam result recorded"
    }


# ✅ [READ] exam results, filtered
@router.get("/")
def read_exam_results(
    class_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    student_id: Optional[str] = None,
    term: Optional[Term] = None,
    store: InMemoryStore = Depends(get_store),
):
    records = [
        r for r in store.exam_results
        if (class_id is None or r.class_id == class_id)
        and (subject_id is None or r.subject_id == subject_id)
        and (student_id is None or r.student_id == student_id)
        and (term is None or r.term == term)
    ]
    return {
        "success": True,
        "data": [r.model_dump(mode="json") for r in records]
    }
