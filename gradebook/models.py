"""Core records for users, courses and grades."""

from __future__ import annotations

from dataclasses import dataclass, field

BASE_ID = 2500000

# (activity name, score, maximum score)
ScoreEntry = tuple[str, float, float]


@dataclass
class GradeRecord:
    """Scores one student holds in one course."""

    student_id: int
    final_grade: float = 0.0
    performance_tasks: list[ScoreEntry] = field(default_factory=list)
    written_tasks: list[ScoreEntry] = field(default_factory=list)
    major_exams: list[ScoreEntry] = field(default_factory=list)


@dataclass
class Course:
    """A course handled by a teacher, with its enrolled students."""

    course_id: int
    name: str
    teacher: str
    teacher_id: int
    base: float = 0.0
    performance_percentage: float = 0.0
    written_percentage: float = 0.0
    major_percentage: float = 0.0
    enrolled_student_ids: list[int] = field(default_factory=list)
    student_records: list[GradeRecord] = field(default_factory=list)


@dataclass
class User:
    """An account: student, teacher or admin."""

    id: int
    username: str
    role: str
    section: str = ""
    password: str = ""
    padding: int = 0
    gpa: float = 0.0
    final_grades: list[int] = field(default_factory=list)
    courses_enrolled: list[int] = field(default_factory=list)
    courses_handled: list[int] = field(default_factory=list)


@dataclass
class Gradebook:
    """All users and courses, plus who is logged in."""

    users: list[User] = field(default_factory=list)
    courses: list[Course] = field(default_factory=list)
    logged_in_id: int | None = None
    running: bool = True
    course_count: int = 0

    def add_user(self, username: str, role: str, section: str | None = None) -> User:
        """Create a user with the next free ID and store it."""
        user = User(
            id=BASE_ID + len(self.users),
            username=username,
            role=role,
            section=section or "",
        )
        self.users.append(user)
        return user

    def has_user(self, user_id: int) -> bool:
        return 0 <= user_id - BASE_ID < len(self.users)

    def user(self, user_id: int) -> User:
        """Return the user with this ID; KeyError if there is none."""
        if not self.has_user(user_id):
            raise KeyError(user_id)
        return self.users[user_id - BASE_ID]

    def course(self, course_id: int) -> Course:
        """Return the course with this ID; KeyError if there is none."""
        for course in self.courses:
            if course.course_id == course_id:
                return course
        raise KeyError(course_id)

    def current_user(self) -> User | None:
        if self.logged_in_id is None:
            return None
        return self.user(self.logged_in_id)

    def log_in(self, user_id: int) -> User:
        user = self.user(user_id)
        self.logged_in_id = user.id
        return user

    def log_out(self) -> None:
        self.logged_in_id = None