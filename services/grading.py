"""
services/grading.py

- Rounding helper shared by every score calculation (round half up, never banker's rounding)
- Grading scale and letter grade lookup
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from schemas.reports import GradeScale, LetterGrade


# Ordered, contiguous over [0, 100]; first matching band wins
GRADING_SCALE: List[GradeScale] = [
    GradeScale(grade="A", min_percentage=80, max_percentage=100, remark="Excellent"),
    GradeScale(grade="B", min_percentage=70, max_percentage=79, remark="Very Good"),
    GradeScale(grade="C", min_percentage=60, max_percentage=69, remark="Good"),
    GradeScale(grade="D", min_percentage=50, max_percentage=59, remark="Fair"),
    GradeScale(grade="F", min_percentage=0, max_percentage=49, remark="Fail"),
]

FALLBACK_GRADE = LetterGrade(grade="F", remark="Fail")


def round_half_up(value: float, places: int = 2) -> float:
    """Round to `places` decimals with .5 going up (2.345 -> 2.35, 49.5 -> 50)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def get_letter_grade(percentage: float) -> LetterGrade:
    rounded = int(round_half_up(percentage, 0))
    for band in GRADING_SCALE:
        if band.min_percentage <= rounded <= band.max_percentage:
            return LetterGrade(grade=band.grade, remark=band.remark)
    return FALLBACK_GRADE.model_copy()
