from pydantic import BaseModel, ConfigDict
from typing import Literal


# ✅ Output schema for GET responses
class Subject(BaseModel):
    id: str                                  # subject id
    subject_code: str                        # e.g. SUB2024003
    name: str                                # subject name
    code: str                                # short code printed on report cards, e.g. MATH201
    grade_level: str                         # grade the subject is offered at
    status: Literal["active", "inactive"] = "active"

    model_config = ConfigDict(from_attributes=True)
