"""
schemas/assessments.py

- Continuous assessment ("output of work") schemas
- AssessmentComponent / Term are closed enums; a score can only name one of the four components
- TermConfig governs how many assessments each component has and their max score
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssessmentComponent(str, Enum):
    CLASS_WORK = "classWork"
    HOME_WORK = "homeWork"
    QUIZ = "quiz"
    PROJECT = "project"


class Term(str, Enum):
    TERM_1 = "Term 1"
    TERM_2 = "Term 2"
    TERM_3 = "Term 3"


COMPONENT_LABELS = {
    AssessmentComponent.CLASS_WORK: "Class Work",
    AssessmentComponent.HOME_WORK: "Home Work",
    AssessmentComponent.QUIZ: "Quiz",
    AssessmentComponent.PROJECT: "Project",
}


# ==========================================================
# [Term configuration]
# ==========================================================
class ComponentConfig(BaseModel):
    key: AssessmentComponent                                 # component kind
    label: str                                               # display label
    required_assessments: int = Field(..., ge=1)             # number of assessments in the term
    max_score: float = Field(..., gt=0)                      # max score per assessment


class TermConfig(BaseModel):
    academic_year: str                                       # e.g. "2024-2025"
    term: Term
    components: List[ComponentConfig] = Field(default_factory=list)

    @field_validator("components")
    @classmethod
    def _unique_components(cls, v: List[ComponentConfig]) -> List[ComponentConfig]:
        keys = [c.key for c in v]
        if len(keys) != len(set(keys)):
            raise ValueError("each assessment component may appear only once per term")
        return v

    def component(self, key: AssessmentComponent) -> Optional[ComponentConfig]:
        for c in self.components:
            if c.key == key:
                return c
        return None


class ComponentConfigUpdate(BaseModel):
    key: AssessmentComponent
    required_assessments: int                                # clamped to >= 1 on save
    max_score: float                                         # clamped to >= 1 on save


# ==========================================================
# [Scores]
# ==========================================================
class AssessmentScore(BaseModel):
    id: str                                                  # e.g. SCR202412345
    student_id: str
    class_id: str
    subject_id: str
    term: Term
    component: AssessmentComponent
    assessment_number: int = Field(..., ge=1)
    score: float = Field(..., ge=0)
    max_score: float = Field(..., gt=0)
    entered_by: str
    entered_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ScoreEntry(BaseModel):
    student_id: str
    score: float


class ScoreBatchCreate(BaseModel):
    """One assessment sheet: every student's score for a single assessment"""
    class_id: str
    subject_id: str
    term: Term
    component: AssessmentComponent
    assessment_number: int
    entries: List[ScoreEntry]
    entered_by: str = "current-user"


# ==========================================================
# [Derived]
# ==========================================================
class StudentSummary(BaseModel):
    class_work: float = 0
    home_work: float = 0
    quiz: float = 0
    project: float = 0
    total: float = 0
    percentage: float = 0


class StudentSummaryRow(StudentSummary):
    student_id: str
    student_name: str
