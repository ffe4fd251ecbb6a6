"""
services/report_service.py

Report card computation.

Per subject offered at the class's grade level:
    CA    = CA percentage / 100 * 30
    Exam  = exam score   / 100 * 70   (0 when no exam result exists)
    Total = CA + Exam                 -> letter grade
Every figure is rounded half up to 2 decimals. A student or class that cannot be
resolved yields None; missing scores, exams or attendance only contribute zeros.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from database.store import SchoolDirectory
from schemas.assessments import AssessmentScore, Term, TermConfig
from schemas.attendance import AttendanceRecord, AttendanceStatus
from schemas.exams import ExamResult
from schemas.reports import AttendanceSummary, StudentReportData, SubjectReportRow
from schemas.subjects import Subject
from services.grading import get_letter_grade, round_half_up
from services.output_of_work import DEFAULT_TERM_CONFIG, get_student_summary

logger = logging.getLogger(__name__)

CA_WEIGHT = 30
EXAM_WEIGHT = 70


def get_subjects_for_class(class_id: str, directory: SchoolDirectory) -> List[Subject]:
    class_data = directory.get_class(class_id)
    if class_data is None:
        return []
    return directory.subjects_for_grade(class_data.grade)


def find_exam_result(
    student_id: str, subject_id: str, term: Term, exam_results: Iterable[ExamResult]
) -> Optional[ExamResult]:
    # duplicates are kept in the collection; the first one entered is used
    return next(
        (
            e for e in exam_results
            if e.student_id == student_id and e.subject_id == subject_id and e.term == term
        ),
        None,
    )


def summarize_attendance(
    student_id: str, class_id: str, records: Iterable[AttendanceRecord]
) -> AttendanceSummary:
    statuses = Counter(
        r.status for r in records if r.student_id == student_id and r.class_id == class_id
    )
    total_days = sum(statuses.values())
    present = statuses[AttendanceStatus.PRESENT]
    late = statuses[AttendanceStatus.LATE]
    # late still counts as attended
    percentage = round_half_up((present + late) / total_days * 100) if total_days > 0 else 0

    return AttendanceSummary(
        present=present,
        absent=statuses[AttendanceStatus.ABSENT],
        late=late,
        excused=statuses[AttendanceStatus.EXCUSED],
        total_days=total_days,
        attendance_percentage=percentage,
    )


def _subject_row(
    student_id: str,
    subject: Subject,
    term: Term,
    scores: List[AssessmentScore],
    exam_results: List[ExamResult],
    config: TermConfig,
) -> SubjectReportRow:
    summary = get_student_summary(student_id, subject.id, term, scores, config)
    ca_score = round_half_up(summary.percentage / 100 * CA_WEIGHT)

    exam = find_exam_result(student_id, subject.id, term, exam_results)
    exam_score = round_half_up(exam.exam_score / 100 * EXAM_WEIGHT) if exam else 0

    total = round_half_up(ca_score + exam_score)
    letter = get_letter_grade(total)

    return SubjectReportRow(
        subject_id=subject.id,
        subject_name=subject.name,
        subject_code=subject.code,
        ca_score=ca_score,
        exam_score=exam_score,
        total=total,
        grade=letter.grade,
        remark=letter.remark,
    )


def compute_student_report(
    student_id: str,
    class_id: str,
    term: Term,
    scores: Iterable[AssessmentScore],
    exam_results: Iterable[ExamResult],
    attendance_records: Iterable[AttendanceRecord],
    directory: SchoolDirectory,
    config: TermConfig = DEFAULT_TERM_CONFIG,
) -> Optional[StudentReportData]:
    student = directory.get_student(student_id)
    class_data = directory.get_class(class_id)
    if student is None or class_data is None:
        logger.debug("report skipped: student %s / class %s not found", student_id, class_id)
        return None

    scores = list(scores)
    exam_results = list(exam_results)

    rows = [
        _subject_row(student_id, subject, term, scores, exam_results, config)
        for subject in get_subjects_for_class(class_id, directory)
    ]

    overall_average = round_half_up(sum(r.total for r in rows) / len(rows)) if rows else 0
    overall = get_letter_grade(overall_average)

    return StudentReportData(
        student_id=student_id,
        admission_number=student.admission_number,
        student_name=student.full_name,
        class_name=class_data.name,
        grade=class_data.grade,
        section=class_data.section,
        term=term,
        academic_year=class_data.academic_year,
        subjects=rows,
        attendance=summarize_attendance(student_id, class_id, attendance_records),
        overall_average=overall_average,
        overall_grade=overall.grade,
        overall_remark=overall.remark,
        total_students=len(class_data.student_ids),
        generated_at=datetime.now(timezone.utc),
    )


def generate_bulk_reports(
    class_id: str,
    term: Term,
    scores: Iterable[AssessmentScore],
    exam_results: Iterable[ExamResult],
    attendance_records: Iterable[AttendanceRecord],
    directory: SchoolDirectory,
    config: TermConfig = DEFAULT_TERM_CONFIG,
) -> List[StudentReportData]:
    class_data = directory.get_class(class_id)
    if class_data is None:
        return []

    scores = list(scores)
    exam_results = list(exam_results)
    attendance_records = list(attendance_records)

    reports = []
    for student_id in class_data.student_ids:
        report = compute_student_report(
            student_id, class_id, term, scores, exam_results, attendance_records, directory, config
        )
        if report is not None:
            reports.append(report)

    logger.info("generated %d/%d reports for class %s %s",
                len(reports), len(class_data.student_ids), class_id, term.value)
    return reports
