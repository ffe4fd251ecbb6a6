from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from database.store import InMemoryStore, get_store
from schemas.assessments import AssessmentComponent, ScoreBatchCreate, StudentSummaryRow, Term
from services.output_of_work import get_student_summary, upsert_scores

router = APIRouter(prefix="/output-of-work", tags=["Output of work"])


# ==========================================================
# [Step 1] score entry
# ==========================================================

# ✅ [READ] recorded scores
@router.get("/scores")
def read_scores(
    class_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    student_id: Optional[str] = None,
    term: Optional[Term] = None,
    component: Optional[AssessmentComponent] = None,
    store: InMemoryStore = Depends(get_store),
):
    records = store.scores
    filters = {
        "class_id": class_id,
        "subject_id": subject_id,
        "student_id": student_id,
        "term": term,
        "component": component,
    }
    for field, value in filters.items():
        if value is not None:
            records = [r for r in records if getattr(r, field) == value]

    return {
        "success": True,
        "data": [r.model_dump(mode="json") for r in records],
        "message": f"{len(records)} score(s)"
    }


# ✅ [UPSERT] save one assessment sheet for a class
# ScoreValidationError is turned into a 422 by the global error handler
@router.post("/scores")
def save_scores(batch: ScoreBatchCreate, store: InMemoryStore = Depends(get_store)):
    class_data = store.directory.get_class(batch.class_id)
    if not class_data:
        raise HTTPException(status_code=404, detail="Class not found")

    outsiders = [e.student_id for e in batch.entries if e.student_id not in class_data.student_ids]
    if outsiders:
        raise HTTPException(status_code=422, detail=f"Students not enrolled in class: {', '.join(outsiders)}")

    before = len(store.scores)
    store.scores = upsert_scores(store.scores, batch, store.get_term_config(batch.term))
    created = len(store.scores) - before

    return {
        "success": True,
        "data": {
            "created": created,
            "updated": len(batch.entries) - created
        },
        "message": "Scores saved successfully"
    }


# ==========================================================
# [Step 2] summary table
# ==========================================================

# ✅ [SUMMARY] per-student component averages for one class / subject / term
@router.get("/summary")
def get_score_summary(
    class_id: str,
    subject_id: str,
    term: Term,
    store: InMemoryStore = Depends(get_store),
):
    class_data = store.directory.get_class(class_id)
    if not class_data:
        return {"success": False, "error": {"code": 404, "message": "Class not found"}}

    config = store.get_term_config(term)
    rows = []
    for student_id in class_data.student_ids:
        student = store.directory.get_student(student_id)
        if not student:
            continue
        summary = get_student_summary(student_id, subject_id, term, store.scores, config)
        rows.append(StudentSummaryRow(student_id=student_id, student_name=student.full_name, **summary.model_dump()))

    return {
        "success": True,
        "data": {
            "rows": [r.model_dump() for r in rows],
            "has_data": any(r.total > 0 for r in rows)
        },
        "message": f"Summary for {class_data.name} {term.value}"
    }
