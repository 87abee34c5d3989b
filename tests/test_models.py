import pytest

from gradebook.models import BASE_ID, Course, GradeRecord, Gradebook


def test_user_ids_start_at_base_and_increase():
    book = Gradebook()
    first = book.add_user("Alice", "teacher")
    second = book.add_user("Bob", "student", "7-A")
    assert first.id == 2500000
    assert second.id == first.id + 1
    assert book.users == [first, second]


def test_section_defaults_to_empty():
    book = Gradebook()
    assert book.add_user("Alice", "teacher").section == ""
    assert book.add_user("Bob", "student", "7-A").section == "7-A"


def test_user_lookup():
    book = Gradebook()
    bob = book.add_user("Bob", "student")
    assert book.user(BASE_ID) is bob
    assert book.has_user(BASE_ID)
    assert not book.has_user(BASE_ID + 1)
    assert not book.has_user(BASE_ID - 1)


@pytest.mark.parametrize("offset", [-1, 1, 50])
def test_unknown_user_raises(offset):
    book = Gradebook()
    book.add_user("Bob", "student")
    with pytest.raises(KeyError):
        book.user(BASE_ID + offset)


def test_log_in_and_out():
    book = Gradebook()
    bob = book.add_user("Bob", "student")
    assert book.current_user() is None
    assert book.log_in(bob.id) is bob
    assert book.current_user() is bob
    book.log_out()
    assert book.logged_in_id is None
    assert book.current_user() is None


def test_log_in_unknown_user_raises():
    book = Gradebook()
    with pytest.raises(KeyError):
        book.log_in(BASE_ID)
    assert book.logged_in_id is None


def test_course_lookup_by_id():
    book = Gradebook()
    course = Course(course_id=3, name="Math", teacher="Alice", teacher_id=BASE_ID)
    book.courses.append(course)
    assert book.course(3) is course
    with pytest.raises(KeyError):
        book.course(0)


def test_default_lists_are_independent():
    first = GradeRecord(student_id=BASE_ID)
    second = GradeRecord(student_id=BASE_ID + 1)
    first.performance_tasks.append(("Quiz", 8.0, 10.0))
    assert second.performance_tasks == []
    assert first.final_grade == 0.0