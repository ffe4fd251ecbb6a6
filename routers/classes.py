from fastapi import APIRouter, Depends, HTTPException

from database.store import InMemoryStore, get_store
from services.report_service import get_subjects_for_class

router = APIRouter(prefix="/classes", tags=["Classes"])


# ==========================================================
# [Step 1] read routes
# ==========================================================

# ✅ [READ] all classes
@router.get("/")
def read_classes(store: InMemoryStore = Depends(get_store)):
    classes = store.directory.classes.values()
    return {
        "success": True,
        "data": [
            {**c.model_dump(), "student_count": len(c.student_ids)}
            for c in classes
        ],
        "message": "All classes loaded"
    }


# ✅ [READ] class detail with enrolled students
@router.get("/{class_id}")
def read_class(class_id: str, store: InMemoryStore = Depends(get_store)):
    class_data = store.directory.get_class(class_id)
    if not class_data:
        raise HTTPException(status_code=404, detail="Class not found")

    students = []
    for student_id in class_data.student_ids:
        student = store.directory.get_student(student_id)
        if student:
            students.append({"id": student.id, "full_name": student.full_name,
                             "admission_number": student.admission_number})

    return {
        "success": True,
        "data": {**class_data.model_dump(), "students": students},
        "message": f"Class {class_data.name} loaded"
    }


# ✅ [READ] subjects on the report card of a class
@router.get("/{class_id}/subjects")
def read_class_subjects(class_id: str, store: InMemoryStore = Depends(get_store)):
    if not store.directory.get_class(class_id):
        raise HTTPException(status_code=404, detail="Class not found")
    subjects = get_subjects_for_class(class_id, store.directory)
    return {
        "success": True,
        "data": [s.model_dump() for s in subjects],
        "message": f"{len(subjects)} subject(s) offered"
    }
