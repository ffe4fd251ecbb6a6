from pydantic import BaseModel
from datetime import datetime
from typing import List

from schemas.assessments import Term


class GradeScale(BaseModel):
    grade: str                              # letter grade
    min_percentage: int                     # inclusive
    max_percentage: int                     # inclusive
    remark: str                             # e.g. Excellent


class LetterGrade(BaseModel):
    grade: str
    remark: str


class SubjectReportRow(BaseModel):
    subject_id: str
    subject_name: str
    subject_code: str
    ca_score: float                         # out of 30
    exam_score: float                       # out of 70
    total: float                            # out of 100
    grade: str
    remark: str


class AttendanceSummary(BaseModel):
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0
    total_days: int = 0
    attendance_percentage: float = 0


# ==========================================================
# [Output schema] report card, computed on demand and never stored
# ==========================================================
class StudentReportData(BaseModel):
    student_id: str
    admission_number: str
    student_name: str
    class_name: str
    grade: str
    section: str
    term: Term
    academic_year: str
    subjects: List[SubjectReportRow]
    attendance: AttendanceSummary
    overall_average: float
    overall_grade: str
    overall_remark: str
    total_students: int
    generated_at: datetime
