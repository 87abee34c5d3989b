"""Courses, enrolment and the score lists kept for each student."""

from __future__ import annotations

from enum import Enum

from gradebook.console import DIVIDER
from gradebook.models import Course, Gradebook, GradeRecord, ScoreEntry

NO_RECORDS = "\t\t-------NO RECORD/s FOUND-------"
NO_STUDENTS = "-------NO STUDENT IS ENROLLED-------"


class CourseError(Exception):
    """A course operation could not be carried out."""


class Category(Enum):
    """The three kinds of graded work, named by their field on a record."""

    PERFORMANCE_TASK = "performance_tasks"
    WRITTEN_TASK = "written_tasks"
    MAJOR_EXAM = "major_exams"

    @property
    def heading(self) -> str:
        return _HEADINGS[self]

    @classmethod
    def from_option(cls, option: str) -> Category:
        """Map a menu letter (A, B or C) to a category."""
        try:
            return _OPTIONS[option.lower()]
        except KeyError:
            raise CourseError(f"unknown category option: {option!r}") from None

    def entries(self, record: GradeRecord) -> list[ScoreEntry]:
        """The list of scores of this category held by the record."""
        return getattr(record, self.value)


_HEADINGS = {
    Category.PERFORMANCE_TASK: "\tPerformace Task:",
    Category.WRITTEN_TASK: "\tWritten Task:",
    Category.MAJOR_EXAM: "\tMajor Exam: ",
}

_OPTIONS = {
    "a": Category.PERFORMANCE_TASK,
    "b": Category.WRITTEN_TASK,
    "c": Category.MAJOR_EXAM,
}


def _format_number(value: float) -> str:
    return f"{value:g}"


def create_course(
    book: Gradebook,
    teacher_id: int,
    name: str,
    section: str,
    base: float = 0.0,
    performance: float = 0.0,
    written: float = 0.0,
    major: float = 0.0,
) -> Course:
    """Build a course for a teacher, enrolling every user of the section.

    The course takes the next course ID; it is not stored until registered.
    """
    try:
        teacher = book.user(teacher_id)
    except KeyError:
        raise CourseError(f"no teacher with ID {teacher_id}") from None

    course = Course(
        course_id=book.course_count,
        name=name,
        teacher=teacher.username,
        teacher_id=teacher.id,
        base=base,
        performance_percentage=performance,
        written_percentage=written,
        major_percentage=major,
    )
    for user in book.users:
        if user.section == section:
            course.enrolled_student_ids.append(user.id)
            course.student_records.append(GradeRecord(student_id=user.id))
    book.course_count += 1
    return course


def register_course(book: Gradebook, course: Course) -> Course:
    """Store a course and list it among its teacher's handled courses."""
    try:
        teacher = book.user(course.teacher_id)
    except KeyError:
        raise CourseError(f"no teacher with ID {course.teacher_id}") from None
    if any(existing.course_id == course.course_id for existing in book.courses):
        raise CourseError(f"course {course.course_id} already exists")
    book.courses.append(course)
    teacher.courses_handled.append(course.course_id)
    return course


def add_score(
    record: GradeRecord, category: Category, name: str, score: float, over: float
) -> ScoreEntry:
    """Append a scored activity to the record."""
    entry = (name, score, over)
    category.entries(record).append(entry)
    return entry


def add_bonus(record: GradeRecord, category: Category, name: str, points: float) -> ScoreEntry:
    """Append additional points, counted as full marks out of themselves."""
    return add_score(record, category, name, points, points)


def edit_score(
    record: GradeRecord, category: Category, index: int, name: str, score: float
) -> ScoreEntry:
    """Rename and rescore the entry at a zero-based index, keeping its maximum."""
    entries = category.entries(record)
    if not 0 <= index < len(entries):
        raise CourseError(f"no entry number {index + 1}")
    _, _, over = entries[index]
    entry = (name, score, over)
    entries[index] = entry
    return entry


def format_records(record: GradeRecord, category: Category) -> str:
    """List the record's entries of one category, one line each."""
    entries = category.entries(record)
    if not entries:
        return NO_RECORDS + "\n"
    return "".join(f"\t\t* {name} - {_format_number(score)}\n" for name, score, _ in entries)


def format_roster(book: Gradebook, course: Course) -> str:
    """Every enrolled student with all of their scores."""
    lines = [DIVIDER + "\n"]
    if course.enrolled_student_ids:
        pairs = zip(course.enrolled_student_ids, course.student_records)
        for number, (student_id, record) in enumerate(pairs, start=1):
            lines.append(f"{number}.) {book.user(student_id).username}\n")
            for category in Category:
                lines.append(category.heading + "\n")
                lines.append(format_records(record, category))
            lines.append("\n")
    else:
        lines.append(NO_STUDENTS + "\n")
    lines.append(DIVIDER + "\n")
    return "".join(lines)