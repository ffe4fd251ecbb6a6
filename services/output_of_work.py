"""
services/output_of_work.py

Continuous assessment ("output of work") calculations and score entry.

- get_component_average / get_student_summary are pure and never raise for missing data
- upsert_scores validates a score sheet against the term config and returns a new list
"""

import logging
import random
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from schemas.assessments import (
    COMPONENT_LABELS,
    AssessmentComponent,
    AssessmentScore,
    ComponentConfig,
    ComponentConfigUpdate,
    ScoreBatchCreate,
    StudentSummary,
    Term,
    TermConfig,
)
from services.grading import round_half_up

logger = logging.getLogger(__name__)


class ScoreValidationError(ValueError):
    """A submitted score does not fit the governing term configuration."""


def default_term_config(term: Term = Term.TERM_1, academic_year: str = "2024-2025") -> TermConfig:
    counts = {
        AssessmentComponent.CLASS_WORK: 4,
        AssessmentComponent.HOME_WORK: 4,
        AssessmentComponent.QUIZ: 2,
        AssessmentComponent.PROJECT: 1,
    }
    return TermConfig(
        academic_year=academic_year,
        term=term,
        components=[
            ComponentConfig(
                key=key,
                label=COMPONENT_LABELS[key],
                required_assessments=count,
                max_score=10,
            )
            for key, count in counts.items()
        ],
    )


DEFAULT_TERM_CONFIG = default_term_config()


def generate_score_id(taken: Iterable[str] = ()) -> str:
    """Random `SCR<year><5 digits>` id that is not already in `taken`."""
    taken = set(taken)
    year = datetime.now().year
    while True:
        score_id = f"SCR{year}{random.randint(0, 99999):05d}"
        if score_id not in taken:
            return score_id


# ==========================================================
# [Aggregation]
# ==========================================================
def get_component_average(
    student_id: str,
    subject_id: str,
    term: Term,
    component: AssessmentComponent,
    scores: Iterable[AssessmentScore],
) -> float:
    matching = [
        s.score
        for s in scores
        if s.student_id == student_id
        and s.subject_id == subject_id
        and s.term == term
        and s.component == component
    ]
    if not matching:
        return 0
    return round_half_up(sum(matching) / len(matching))


def get_student_summary(
    student_id: str,
    subject_id: str,
    term: Term,
    scores: Iterable[AssessmentScore],
    config: TermConfig,
) -> StudentSummary:
    scores = list(scores)
    averages = {
        key: get_component_average(student_id, subject_id, term, key, scores)
        for key in AssessmentComponent
    }
    total = round_half_up(sum(averages.values()))
    max_total = sum(c.max_score for c in config.components)
    percentage = round_half_up(total / max_total * 100) if max_total > 0 else 0

    return StudentSummary(
        class_work=averages[AssessmentComponent.CLASS_WORK],
        home_work=averages[AssessmentComponent.HOME_WORK],
        quiz=averages[AssessmentComponent.QUIZ],
        project=averages[AssessmentComponent.PROJECT],
        total=total,
        percentage=percentage,
    )


# ==========================================================
# [Score entry]
# ==========================================================
def _score_key(s) -> tuple:
    return (s.student_id, s.class_id, s.subject_id, s.term, s.component, s.assessment_number)


def upsert_scores(
    scores: List[AssessmentScore],
    batch: ScoreBatchCreate,
    config: TermConfig,
    now: Optional[datetime] = None,
) -> List[AssessmentScore]:
    """
    Apply one assessment sheet to the score list.

    - Rows sharing the composite key (student, class, subject, term, component,
      assessment number) are replaced in place and keep their id
    - The input list is left untouched; the updated copy is returned
    """
    if batch.term != config.term:
        raise ScoreValidationError(f"term config is for {config.term.value}, not {batch.term.value}")

    component = config.component(batch.component)
    if component is None:
        raise ScoreValidationError(f"component '{batch.component.value}' is not configured for {config.term.value}")

    if not 1 <= batch.assessment_number <= component.required_assessments:
        raise ScoreValidationError(
            f"assessment number must be between 1 and {component.required_assessments} for {component.label}"
        )

    for entry in batch.entries:
        if not 0 <= entry.score <= component.max_score:
            raise ScoreValidationError(
                f"score {entry.score} for student {entry.student_id} is outside 0..{component.max_score}"
            )

    now = now or datetime.now(timezone.utc)
    updated = list(scores)
    index: Dict[tuple, int] = {_score_key(s): i for i, s in reversed(list(enumerate(updated)))}
    taken = {s.id for s in updated}

    for entry in batch.entries:
        key = (entry.student_id, batch.class_id, batch.subject_id, batch.term, batch.component, batch.assessment_number)
        existing = index.get(key)
        if existing is not None:
            score_id = updated[existing].id
        else:
            score_id = generate_score_id(taken)
            taken.add(score_id)
        record = AssessmentScore(
            id=score_id,
            student_id=entry.student_id,
            class_id=batch.class_id,
            subject_id=batch.subject_id,
            term=batch.term,
            component=batch.component,
            assessment_number=batch.assessment_number,
            score=entry.score,
            max_score=component.max_score,
            entered_by=batch.entered_by,
            entered_at=now,
        )
        if existing is not None:
            updated[existing] = record
        else:
            index[key] = len(updated)
            updated.append(record)

    logger.info(
        "saved %d %s scores (assessment %d) for class %s subject %s %s",
        len(batch.entries), batch.component.value, batch.assessment_number,
        batch.class_id, batch.subject_id, batch.term.value,
    )
    return updated


# ==========================================================
# [Term configuration]
# ==========================================================
def apply_config_update(config: TermConfig, updates: List[ComponentConfigUpdate]) -> TermConfig:
    """Return a copy of `config` with counts and max scores changed, each clamped to at least 1."""
    by_key = {u.key: u for u in updates}
    components = []
    for c in config.components:
        u = by_key.get(c.key)
        if u is None:
            components.append(c)
            continue
        components.append(ComponentConfig(
            key=c.key,
            label=c.label,
            required_assessments=max(1, u.required_assessments),
            max_score=max(1, u.max_score),
        ))
    return TermConfig(academic_year=config.academic_year, term=config.term, components=components)
