from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from database.seed import load_store
from database.store import InMemoryStore, SchoolDirectory, set_store
from schemas.assessments import AssessmentComponent, AssessmentScore, Term
from schemas.classes import SchoolClass
from schemas.students import Student
from schemas.subjects import Subject

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
ENTERED_AT = datetime(2024, 10, 1, 9, 0, tzinfo=timezone.utc)


def make_score(student_id, subject_id, component, number, score, term=Term.TERM_1, class_id="C1", max_score=10):
    return AssessmentScore(
        id=f"SCR-{student_id}-{subject_id}-{component.value}-{number}",
        student_id=student_id,
        class_id=class_id,
        subject_id=subject_id,
        term=term,
        component=component,
        assessment_number=number,
        score=score,
        max_score=max_score,
        entered_by="TCH001",
        entered_at=ENTERED_AT,
    )


@pytest.fixture
def directory():
    """One grade-7 class with two students and a single active subject."""
    return SchoolDirectory(
        students=[
            Student(id="S1", admission_number="ADM1", first_name="Ada", middle_name="K", last_name="Obi", grade="7", section="A"),
            Student(id="S2", admission_number="ADM2", first_name="Ben", last_name="Ade", grade="7", section="A"),
        ],
        classes=[
            SchoolClass(id="C1", class_code="CLS1", name="Grade 7-A", grade="7", section="A",
                        academic_year="2024-2025", student_ids=["S1", "S2"]),
        ],
        subjects=[
            Subject(id="MATH", subject_code="SUB1", name="Mathematics", code="MTH7", grade_level="7"),
            Subject(id="ART", subject_code="SUB2", name="Art", code="ART7", grade_level="7", status="inactive"),
            Subject(id="BIO", subject_code="SUB3", name="Biology", code="BIO8", grade_level="8"),
        ],
    )


@pytest.fixture
def class_work_scores():
    # four class work scores averaging 8/10
    return [
        make_score("S1", "MATH", AssessmentComponent.CLASS_WORK, n, s)
        for n, s in enumerate([7, 8, 9, 8], start=1)
    ]


@pytest.fixture
def seeded_store():
    return load_store(str(DATA_DIR))


@pytest.fixture
def client(seeded_store):
    from main import app

    set_store(seeded_store)
    yield TestClient(app)
    set_store(InMemoryStore())
