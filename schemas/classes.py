from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal


# ✅ Response / read schema for a class
# `grade` is matched against Subject.grade_level to pick the subjects on a report card
class SchoolClass(BaseModel):
    id: str                                              # class id (PK)
    class_code: str                                      # e.g. CLS2024003
    name: str                                            # e.g. "Grade 10-A"
    grade: str                                           # grade level
    section: str                                         # section letter
    academic_year: str                                   # e.g. "2024-2025"
    student_ids: List[str] = Field(default_factory=list) # enrolled students, report order
    status: Literal["active", "inactive"] = "active"

    model_config = ConfigDict(from_attributes=True)
