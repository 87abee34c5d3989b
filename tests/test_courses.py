import pytest

from gradebook.console import DIVIDER
from gradebook.courses import (
    NO_RECORDS,
    NO_STUDENTS,
    Category,
    CourseError,
    add_bonus,
    add_score,
    create_course,
    edit_score,
    format_records,
    format_roster,
    register_course,
)
from gradebook.models import Gradebook, GradeRecord


@pytest.fixture
def book():
    gradebook = Gradebook()
    gradebook.add_user("Teacher T", "teacher")
    gradebook.add_user("Alice", "student", "A1")
    gradebook.add_user("Bob", "student", "B2")
    gradebook.add_user("Carol", "student", "A1")
    return gradebook


def teacher_id(book):
    return book.users[0].id


def test_create_course_enrolls_section(book):
    course = create_course(book, teacher_id(book), "Math", "A1", 0, 40, 20, 20)
    names = [book.user(i).username for i in course.enrolled_student_ids]
    assert names == ["Alice", "Carol"]
    assert [r.student_id for r in course.student_records] == course.enrolled_student_ids
    assert course.teacher == "Teacher T"
    assert course.teacher_id == teacher_id(book)
    assert course.performance_percentage == 40
    assert course.written_percentage == 20
    assert course.major_percentage == 20


def test_course_ids_increase(book):
    first = create_course(book, teacher_id(book), "Math", "A1")
    second = create_course(book, teacher_id(book), "Science", "B2")
    assert second.course_id == first.course_id + 1
    assert book.course_count == second.course_id + 1


def test_create_course_does_not_store_until_registered(book):
    course = create_course(book, teacher_id(book), "Math", "A1")
    assert book.courses == []
    register_course(book, course)
    assert book.course(course.course_id) is course
    assert book.users[0].courses_handled == [course.course_id]


def test_register_twice_fails(book):
    course = create_course(book, teacher_id(book), "Math", "A1")
    register_course(book, course)
    with pytest.raises(CourseError):
        register_course(book, course)


def test_create_course_unknown_teacher(book):
    with pytest.raises(CourseError):
        create_course(book, 1, "Math", "A1")


def test_add_score_appends_entry():
    record = GradeRecord(student_id=1)
    add_score(record, Category.WRITTEN_TASK, "Quiz 1", 8, 10)
    assert record.written_tasks == [("Quiz 1", 8, 10)]
    assert record.performance_tasks == []
    assert record.major_exams == []


def test_add_bonus_uses_points_as_maximum():
    record = GradeRecord(student_id=1)
    entry = add_bonus(record, Category.MAJOR_EXAM, "Extra", 5)
    assert entry == ("Extra", 5, 5)
    assert record.major_exams == [entry]


def test_edit_score_keeps_maximum():
    record = GradeRecord(student_id=1)
    add_score(record, Category.PERFORMANCE_TASK, "Lab", 30, 50)
    edit_score(record, Category.PERFORMANCE_TASK, 0, "Lab 1", 45)
    assert record.performance_tasks == [("Lab 1", 45, 50)]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_edit_score_bad_index(index):
    record = GradeRecord(student_id=1)
    add_score(record, Category.PERFORMANCE_TASK, "Lab", 30, 50)
    with pytest.raises(CourseError):
        edit_score(record, Category.PERFORMANCE_TASK, index, "X", 1)


def test_from_option():
    assert Category.from_option("A") is Category.PERFORMANCE_TASK
    assert Category.from_option("b") is Category.WRITTEN_TASK
    assert Category.from_option("c") is Category.MAJOR_EXAM
    with pytest.raises(CourseError):
        Category.from_option("z")


def test_format_records_empty():
    record = GradeRecord(student_id=1)
    assert format_records(record, Category.MAJOR_EXAM) == NO_RECORDS + "\n"
    assert NO_RECORDS == "\t\t-------NO RECORD/s FOUND-------"


def test_format_records_lists_entries():
    record = GradeRecord(student_id=1)
    add_score(record, Category.PERFORMANCE_TASK, "Lab", 95.5, 100)
    add_score(record, Category.PERFORMANCE_TASK, "Essay", 90, 100)
    text = format_records(record, Category.PERFORMANCE_TASK)
    assert text.splitlines() == ["\t\t* Lab - 95.5", "\t\t* Essay - 90"]


def test_format_roster_without_students(book):
    course = create_course(book, teacher_id(book), "Math", "Z9")
    text = format_roster(book, course)
    assert text == f"{DIVIDER}\n{NO_STUDENTS}\n{DIVIDER}\n"


def test_format_roster_with_students(book):
    course = create_course(book, teacher_id(book), "Math", "A1")
    add_score(course.student_records[0], Category.WRITTEN_TASK, "Quiz", 7, 10)
    lines = format_roster(book, course).splitlines()
    assert lines[0] == DIVIDER
    assert lines[-1] == DIVIDER
    assert lines[1] == "1.) Alice"
    assert "2.) Carol" in lines
    assert "\t\t* Quiz - 7" in lines
    assert lines.count("\tPerformace Task:") == 2
    assert lines.count("\tMajor Exam: ") == 2
    assert lines.count(NO_RECORDS) == 5