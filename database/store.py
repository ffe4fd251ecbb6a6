"""
database/store.py

- In-memory data store replacing a database session
- SchoolDirectory: read-only reference lookups (students / classes / subjects)
- InMemoryStore: the directory plus the score, exam result, attendance and term config collections
- get_store(): FastAPI dependency handing the process-wide store to routers
"""

import logging
from typing import Dict, List, Optional

from config.settings import settings
from schemas.assessments import AssessmentScore, Term, TermConfig
from schemas.attendance import AttendanceRecord
from schemas.classes import SchoolClass
from schemas.exams import ExamResult
from schemas.students import Student
from schemas.subjects import Subject
from services.output_of_work import default_term_config

logger = logging.getLogger(__name__)


class SchoolDirectory:
    """id -> record lookups for the reference data a report card is built from"""

    def __init__(
        self,
        students: Optional[List[Student]] = None,
        classes: Optional[List[SchoolClass]] = None,
        subjects: Optional[List[Subject]] = None,
    ):
        self.students: Dict[str, Student] = {s.id: s for s in students or []}
        self.classes: Dict[str, SchoolClass] = {c.id: c for c in classes or []}
        self.subjects: List[Subject] = list(subjects or [])

    def get_student(self, student_id: str) -> Optional[Student]:
        return self.students.get(student_id)

    def get_class(self, class_id: str) -> Optional[SchoolClass]:
        return self.classes.get(class_id)

    def subjects_for_grade(self, grade_level: str) -> List[Subject]:
        return [s for s in self.subjects if s.grade_level == grade_level and s.status == "active"]


class InMemoryStore:
    def __init__(self, directory: Optional[SchoolDirectory] = None, academic_year: Optional[str] = None):
        self.directory = directory or SchoolDirectory()
        self.academic_year = academic_year or settings.DEFAULT_ACADEMIC_YEAR
        self.scores: List[AssessmentScore] = []
        self.exam_results: List[ExamResult] = []
        self.attendance: List[AttendanceRecord] = []
        self.term_configs: Dict[Term, TermConfig] = {}

    def get_term_config(self, term: Term) -> TermConfig:
        config = self.term_configs.get(term)
        if config is None:
            config = default_term_config(term, self.academic_year)
        return config

    def save_term_config(self, config: TermConfig) -> TermConfig:
        self.term_configs[config.term] = config
        return config

    def counts(self) -> Dict[str, int]:
        return {
            "students": len(self.directory.students),
            "classes": len(self.directory.classes),
            "subjects": len(self.directory.subjects),
            "scores": len(self.scores),
            "exam_results": len(self.exam_results),
            "attendance": len(self.attendance),
        }


_store = InMemoryStore()


# ✅ dependency injection: routers receive the store through Depends(get_store)
def get_store() -> InMemoryStore:
    return _store


def set_store(store: InMemoryStore) -> InMemoryStore:
    global _store
    _store = store
    logger.info("store replaced: %s", store.counts())
    return _store
