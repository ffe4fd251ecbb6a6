from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from schemas.assessments import Term


# ==========================================================
# [Input schema]
# ==========================================================
class ExamResultCreate(BaseModel):
    student_id: str                          # student id
    class_id: str                            # class id
    subject_id: str                          # subject id
    term: Term                               # Term 1 / 2 / 3
    exam_score: float = Field(..., ge=0, le=100)   # out of 100
    entered_by: str = "current-user"


# ==========================================================
# [Output schema]
# ==========================================================
class ExamResult(ExamResultCreate):
    id: str                                  # e.g. EXR001
    entered_at: datetime

    model_config = ConfigDict(from_attributes=True)
