"""
database/seed.py

Loads the CSV files under `SEED_DATA_DIR` into a fresh InMemoryStore.

    python -m database.seed      # prints the loaded record counts
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, Optional

from config.settings import settings
from database.store import InMemoryStore, SchoolDirectory
from schemas.assessments import AssessmentScore
from schemas.attendance import AttendanceRecord
from schemas.classes import SchoolClass
from schemas.exams import ExamResult
from schemas.students import Student
from schemas.subjects import Subject

logger = logging.getLogger(__name__)


def _read_rows(path: Path) -> Iterator[Dict[str, Optional[str]]]:
    if not path.exists():
        logger.warning("seed file missing: %s", path)
        return
    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            # empty cells are optional fields
            yield {k: (v if v != "" else None) for k, v in row.items()}


def load_directory(data_dir: Path) -> SchoolDirectory:
    students = [Student.model_validate(row) for row in _read_rows(data_dir / "students.csv")]
    subjects = [Subject.model_validate(row) for row in _read_rows(data_dir / "subjects.csv")]

    classes = []
    for row in _read_rows(data_dir / "classes.csv"):
        ids = row.pop("student_ids") or ""
        classes.append(SchoolClass(student_ids=[s for s in ids.split(";") if s], **row))

    return SchoolDirectory(students=students, classes=classes, subjects=subjects)


def load_store(data_dir: Optional[str] = None) -> InMemoryStore:
    base = Path(data_dir or settings.SEED_DATA_DIR)
    store = InMemoryStore(directory=load_directory(base))

    store.scores = [AssessmentScore.model_validate(row) for row in _read_rows(base / "assessment_scores.csv")]
    store.exam_results = [ExamResult.model_validate(row) for row in _read_rows(base / "exam_results.csv")]
    store.attendance = [AttendanceRecord.model_validate(row) for row in _read_rows(base / "attendance.csv")]

    logger.info("seeded store from %s: %s", base, store.counts())
    return store


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    loaded = load_store()
    print(f"✅ CSV -> in-memory store loaded: {loaded.counts()}")
