from fastapi import APIRouter, Depends

from database.store import InMemoryStore, get_store
from schemas.assessments import Term
from services.grading import GRADING_SCALE
from services.output_of_work import DEFAULT_TERM_CONFIG
from services.report_service import compute_student_report, generate_bulk_reports

router = APIRouter(prefix="/reports", tags=["Report cards"])


# ==========================================================
# [Step 1] static routes
# ==========================================================

# ✅ [READ] grading scale printed at the bottom of every report card
@router.get("/grading-scale")
def get_grading_scale():
    return {
        "success": True,
        "data": [band.model_dump() for band in GRADING_SCALE]
    }


# ✅ [INDIVIDUAL] one student's report card
# always weighted with the default term config; stored term edits apply to score entry and the score summary only
@router.get("/student")
def get_student_report(
    student_id: str,
    class_id: str,
    term: Term,
    store: InMemoryStore = Depends(get_store),
):
    report = compute_student_report(
        student_id, class_id, term,
        store.scores, store.exam_results, store.attendance,
        store.directory, DEFAULT_TERM_CONFIG,
    )
    if report is None:
        return {
            "success": False,
            "error": {"code": 404, "message": "Student or class not found"}
        }
    return {
        "success": True,
        "data": report.model_dump(mode="json"),
        "message": f"Report card for {report.student_name} ({term.value})"
    }


# ==========================================================
# [Step 2] dynamic routes
# ==========================================================

# ✅ [BULK] report cards for every student of a class
@router.get("/class/{class_id}")
def get_class_reports(
    class_id: str,
    term: Term,
    store: InMemoryStore = Depends(get_store),
):
    class_data = store.directory.get_class(class_id)
    if not class_data:
        return {
            "success": False,
            "error": {"code": 404, "message": "Class not found"}
        }

    reports = generate_bulk_reports(
        class_id, term,
        store.scores, store.exam_results, store.attendance,
        store.directory, DEFAULT_TERM_CONFIG,
    )
    return {
        "success": True,
        "data": [r.model_dump(mode="json") for r in reports],
        "message": f"{len(reports)} report card(s) generated for {class_data.name}"
    }
