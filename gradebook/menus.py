"""Menus shown once a teacher or student has logged in."""

from __future__ import annotations

from gradebook.console import DIVIDER, Console
from gradebook.courses import (
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
from gradebook.models import Course, Gradebook, GradeRecord, ScoreEntry, User

TEACHER_MENU = (
    " [A]. Create New Course / Subject\n[B]. Open Existing Class\n"
    "[C]. Search Student\n[D]. Settings\n[E]. Log Out"
)
STUDENT_MENU = "[A]. Open Course\n[B]. Log Out"
COURSE_MENU = (
    "1. Display All Students and Scores\n"
    "2. Edit Student Scores\n"
    "3. Generate Class Grade Report\n"
    "4. Add or Remove Students\n"
    "5. Customize Grade Settings\n"
    "6. Return to Main Dashboard"
)
EDIT_MENU = (
    "[A] - Add Scores to everyone\n"
    "[B] - Add Score to a student\n"
    "[C] - Add additional points to a student\n"
    "[D] - Edit score to a student\n"
    "[E] - Go back"
)
CATEGORY_OPTIONS = "[A] - Performance Task\n[B] - Written Task\n[C] - Major Exam"


def _current(book: Gradebook) -> User:
    user = book.current_user()
    if user is None:
        raise CourseError("nobody is logged in")
    return user


def _title(book: Gradebook) -> str:
    return f"    Welcome {_current(book).username}"


def _banner(book: Gradebook, console: Console, text: str) -> None:
    console.banner(_title(book), text)


def _report(console: Console, exc: Exception) -> None:
    if isinstance(exc, ValueError):
        console.write(f"Invalid input: {exc}\n")
    else:
        console.write(f"{exc}\n")


def main_menu(book: Gradebook, console: Console) -> None:
    """Open the menu that matches the logged-in user's role."""
    user = _current(book)
    if user.role == "teacher":
        teacher_menu(book, console)
    elif user.role == "student":
        student_menu(book, console)
    else:
        console.write(f"No menu is available for the {user.role} role.\n")
        book.log_out()


def teacher_menu(book: Gradebook, console: Console) -> None:
    """Teacher dashboard, shown until the teacher logs out."""
    while book.logged_in_id is not None:
        _banner(book, console, TEACHER_MENU)
        option = console.read_char().lower()
        try:
            if option == "a":
                create_course_prompt(book, console)
            elif option == "b":
                open_class(book, console)
            elif option == "e":
                book.log_out()
        except (ValueError, CourseError) as exc:
            _report(console, exc)


def student_menu(book: Gradebook, console: Console) -> None:
    """Student dashboard, shown until the student logs out."""
    while book.logged_in_id is not None:
        _banner(book, console, STUDENT_MENU)
        option = console.read_char().lower()
        if option == "b":
            book.log_out()


def create_course_prompt(book: Gradebook, console: Console) -> Course | None:
    """Ask for a new course's settings and store it once confirmed."""
    user = _current(book)
    _banner(book, console, "Create New Course:\nEnter course's name:")
    name = console.read_line()
    _banner(book, console, "Create New Course:\nDo you want to use default base of grade (zero)?")
    if console.read_char().lower() == "y":
        base = 0.0
    else:
        _banner(book, console, "Create New Course:\nEnter base of grade: ")
        base = console.read_float()
    _banner(book, console, "Create New Course:\nEnter students' section: ")
    section = console.read_line()
    _banner(
        book,
        console,
        "Create Course:\nEnter percent for Performance Task, Written Task, "
        "and Major Examination(e.g. 40 20 20): ",
    )
    performance = console.read_float()
    written = console.read_float()
    major = console.read_float()

    course = create_course(book, user.id, name, section, base, performance, written, major)
    console.write(
        f"{_title(book)}\n{DIVIDER}\n"
        f"Course Name: {course.name}\n"
        f"Course ID: {course.course_id}\n"
        f"Teacher: {course.teacher}\n"
        f"{DIVIDER}\n>> "
    )
    if console.read_char().lower() == "y":
        register_course(book, course)
        console.write("You have successfully created a new course.\n")
        return course
    console.write("Failed to create new course.\n")
    return None


def open_class(book: Gradebook, console: Console) -> Course | None:
    """Let the teacher pick one of their courses and act on it."""
    user = _current(book)
    if not user.courses_handled:
        console.write(
            f"{_title(book)}\n{DIVIDER}\n"
            "You are not currently handling any courses.\n"
            "Create courses first.\n"
            f"{DIVIDER}\n"
        )
        console.pause()
        return None

    lines = [_title(book), DIVIDER, "Courses Handled: "]
    lines += [
        f"{number}.) {book.course(course_id).name}"
        for number, course_id in enumerate(user.courses_handled, start=1)
    ]
    lines.append(DIVIDER)
    console.write("\n".join(lines) + "\n>> ")
    chosen = console.read_int()
    if not 1 <= chosen <= len(user.courses_handled):
        raise CourseError(f"no course number {chosen}")
    course = book.course(user.courses_handled[chosen - 1])

    console.write(f"    {course.name}\n{DIVIDER}\n{COURSE_MENU}\n{DIVIDER}\n>> ")
    option = console.read_int()
    if option == 1:
        display_students(book, console, course)
    elif option == 2:
        edit_students(book, console, course)
    return course


def display_students(book: Gradebook, console: Console, course: Course) -> None:
    """Show every enrolled student with their scores."""
    console.write(format_roster(book, course))
    console.pause()


def edit_students(book: Gradebook, console: Console, course: Course) -> None:
    """Score-editing menu, shown until the teacher goes back."""
    while True:
        console.write(f"{DIVIDER}\n{EDIT_MENU}\n{DIVIDER}\n>> ")
        option = console.read_char().lower()
        if option == "e":
            return
        try:
            if option == "a":
                add_scores_to_everyone_prompt(book, console, course)
            elif option == "b":
                add_score_to_student_prompt(book, console, course)
            elif option == "c":
                add_bonus_prompt(book, console, course)
            elif option == "d":
                edit_score_prompt(book, console, course)
        except (ValueError, CourseError) as exc:
            _report(console, exc)


def _choose_category(console: Console, header: str) -> Category:
    console.write(f"{DIVIDER}\n{header}\n{CATEGORY_OPTIONS}\n{DIVIDER}\n>> ")
    return Category.from_option(console.read_char())


def _choose_student(
    book: Gradebook, console: Console, course: Course
) -> tuple[int, GradeRecord]:
    console.write(
        "".join(
            f"{number}.) {book.user(student_id).username}\n"
            for number, student_id in enumerate(course.enrolled_student_ids, start=1)
        )
    )
    console.write("Choose student: ")
    chosen = console.read_int()
    if not 1 <= chosen <= len(course.student_records):
        raise CourseError(f"no student number {chosen}")
    return chosen, course.student_records[chosen - 1]


def _show_records(
    book: Gradebook,
    console: Console,
    number: int,
    record: GradeRecord,
    category: Category,
) -> None:
    console.write(
        f"{number}.) {book.user(record.student_id).username}\n"
        f"{category.heading}\n"
        f"{format_records(record, category)}"
    )


def _read_score(console: Console, name: str) -> float:
    console.write(f"Add score to {name}: \n{DIVIDER}\n")
    return console.read_float()


def add_scores_to_everyone_prompt(
    book: Gradebook, console: Console, course: Course
) -> list[ScoreEntry]:
    """Record one activity for every enrolled student."""
    category = _choose_category(console, "Add scores to? ")
    console.write("Activity name: ")
    name = console.read_line()
    console.write("Over: ")
    over = console.read_float()
    entries = []
    for number, record in enumerate(course.student_records, start=1):
        _show_records(book, console, number, record, category)
        score = _read_score(console, name)
        entries.append(add_score(record, category, name, score, over))
    return entries


def add_score_to_student_prompt(
    book: Gradebook, console: Console, course: Course
) -> ScoreEntry:
    """Record one activity for a single student."""
    number, record = _choose_student(book, console, course)
    category = _choose_category(console, "Add scores to? ")
    console.write("Activity name: ")
    name = console.read_line()
    console.write("Over: ")
    over = console.read_float()
    _show_records(book, console, number, record, category)
    score = _read_score(console, name)
    return add_score(record, category, name, score, over)


def add_bonus_prompt(book: Gradebook, console: Console, course: Course) -> ScoreEntry:
    """Give a single student additional points."""
    number, record = _choose_student(book, console, course)
    category = _choose_category(console, "Add additional points to? ")
    console.write("Activity name: ")
    name = console.read_line()
    _show_records(book, console, number, record, category)
    points = _read_score(console, name)
    return add_bonus(record, category, name, points)


def edit_score_prompt(book: Gradebook, console: Console, course: Course) -> ScoreEntry:
    """Rename and rescore one of a student's entries."""
    number, record = _choose_student(book, console, course)
    category = _choose_category(console, "Edit score of? ")
    _show_records(book, console, number, record, category)
    console.write(f"Enter number of task to edit: \n{DIVIDER}\n>> ")
    index = console.read_int() - 1
    console.write("Enter new name: ")
    name = console.read_line()
    console.write("Enter new score: ")
    score = console.read_float()
    return edit_score(record, category, index, name, score)