import random
from collections import Counter
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.store import InMemoryStore, get_store
from schemas.attendance import AttendanceCreate, AttendanceRecord, AttendanceStatus
from services.grading import round_half_up
from services.report_service import summarize_attendance

router = APIRouter(prefix="/attendance", tags=["attendance"])


def generate_attendance_id(store: InMemoryStore) -> str:
    taken = {r.id for r in store.attendance}
    year = datetime.now().year
    while True:
        attendance_id = f"ATT{year}{random.randint(0, 9999):04d}"
        if attendance_id not in taken:
            return attendance_id


# ==========================================================
# [Step 1] basic routes
# ==========================================================

# ✅ [CREATE] mark attendance
@router.post("/")
def create_attendance(attendance: AttendanceCreate, store: InMemoryStore = Depends(get_store)):
    record = AttendanceRecord(
        id=generate_attendance_id(store),
        marked_at=datetime.now(timezone.utc),
        **attendance.model_dump(),
    )
    store.attendance.append(record)
    return {
        "success": True,
        "data": record.model_dump(mode="json"),
        "message": "Attendance record created successfully"
    }


# ✅ [READ] attendance records, filtered by student / class
@router.get("/")
def read_attendance_list(
    student_id: Optional[str] = None,
    class_id: Optional[str] = None,
    store: InMemoryStore = Depends(get_store),
):
    records = store.attendance
    if student_id:
        records = [r for r in records if r.student_id == student_id]
    if class_id:
        records = [r for r in records if r.class_id == class_id]
    return {
        "success": True,
        "data": [r.model_dump(mode="json") for r in records]
    }


# ==========================================================
# [Step 2] summaries
# ==========================================================

# ✅ [DAILY SUMMARY] attendance on one day
@router.get("/daily-summary")
def get_daily_attendance_summary(
    day: date = Query(..., description="Day to summarize (e.g. 2025-01-20)"),
    class_id: Optional[str] = None,
    store: InMemoryStore = Depends(get_store),
):
    records = [r for r in store.attendance if r.date == day]
    if class_id:
        records = [r for r in records if r.class_id == class_id]

    total = len(records)
    status_counter = Counter(r.status for r in records)
    present = status_counter.get(AttendanceStatus.PRESENT, 0)
    late = status_counter.get(AttendanceStatus.LATE, 0)
    rate = round_half_up((present + late) / total * 100, 1) if total else 0

    return {
        "success": True,
        "data": {
            "date": day.isoformat(),
            "total": total,
            "present": present,
            "absent": status_counter.get(AttendanceStatus.ABSENT, 0),
            "late": late,
            "excused": status_counter.get(AttendanceStatus.EXCUSED, 0),
            "attendance_rate": f"{rate}%"
        }
    }


# ✅ [STUDENT SUMMARY] the attendance block printed on a report card
@router.get("/summary")
def get_student_attendance_summary(
    student_id: str,
    class_id: str,
    store: InMemoryStore = Depends(get_store),
):
    summary = summarize_attendance(student_id, class_id, store.attendance)
    return {
        "success": True,
        "data": summary.model_dump()
    }
