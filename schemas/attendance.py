from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, datetime


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


# ==========================================================
# [Input schema]
# ==========================================================
class AttendanceCreate(BaseModel):
    student_id: str                          # student id
    class_id: str                            # class id
    date: date                               # school day
    status: AttendanceStatus                 # present / absent / late / excused
    notes: Optional[str] = None              # reason for absence etc.
    marked_by: str = "current-user"          # teacher who marked the register


# ==========================================================
# [Output schema]
# ==========================================================
class AttendanceRecord(AttendanceCreate):
    id: str                                  # e.g. ATT20240001
    marked_at: datetime

    model_config = ConfigDict(from_attributes=True)
