from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional


# ✅ Full student record (GET, detail views)
class Student(BaseModel):
    id: str                                              # student id
    admission_number: str                                # e.g. ADM20240001
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    grade: str                                           # grade level, e.g. "10"
    section: str                                         # section, e.g. "A"
    status: Literal["active", "inactive", "transferred"] = "active"

    model_config = ConfigDict(from_attributes=True)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.middle_name, self.last_name) if p)
