# gradebook

Building blocks for a menu-driven console program that keeps class records.
It holds users (students, teachers and admins), scrambles their passwords,
lets a teacher create courses that enrol every student of a section at once,
and records scores for performance tasks, written tasks and major exams.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gradebook.models`: the records `GradeRecord`, `Course` and `User`, and
  `Gradebook`, which holds every user and course and who is logged in.
  `Gradebook.add_user(username, role, section)` gives each new user the next
  ID number; ID numbers start at 2500000 and go up by one. `user(user_id)`
  and `course(course_id)` raise `KeyError` for an unknown ID; `log_in`,
  `log_out` and `current_user` track the session.
- `gradebook.cipher`: `encrypt(password, user_id, rng)` hides each character
  of a password, shifted by the last digit of the user's ID, among random
  padding and returns an `EncryptedPassword` (the text and the padding
  length). `decrypt(ciphertext, user_id, padding)` recovers the password.
  Characters outside letters, digits and `!@#$%^&*_+` raise `ValueError`.
- `gradebook.console`: `Console` reads whole lines, words, numbers and single
  characters from a text stream (standard input by default) and writes
  framed prompts.
- `gradebook.courses`: `create_course` and `register_course`, `add_score`,
  `add_bonus` (extra points counted out of themselves), `edit_score`,
  `format_records` and `format_roster`, the `Category` enum and
  `CourseError`.
- `gradebook.menus`: the interactive screens shown after log-in.
  `main_menu(book, console)` opens the teacher or student dashboard for the
  logged-in user. A teacher can create a course, open a course they handle,
  list its students with their scores, and add scores for the whole class,
  add a score or bonus points for one student, or change an existing entry.
  A student's dashboard offers only logging out; other roles are logged out
  with a message.

## Example

```python
from gradebook.cipher import decrypt, encrypt
from gradebook.courses import Category, add_score, create_course, format_roster, register_course
from gradebook.models import Gradebook

book = Gradebook()
teacher = book.add_user("Ms. Reyes", "teacher")
student = book.add_user("Ana", "student", "A1")

scrambled = encrypt("password", student.id)
assert decrypt(scrambled.ciphertext, student.id, scrambled.padding) == "password"

course = create_course(book, teacher.id, "Algebra", "A1", performance=40, written=20, major=20)
register_course(book, course)
add_score(course.student_records[0], Category.WRITTEN_TASK, "Quiz 1", 18, 20)
print(format_roster(book, course))
```

To drive the teacher screens over standard input and output:

```python
from gradebook.console import Console
from gradebook.menus import main_menu

book.log_in(teacher.id)
main_menu(book, Console())
```

## What it does not do

- There is no installed command; the screens are started from Python as
  shown above.
- There are no account screens or functions for signing up, logging in with
  a password, checking password strength or resetting a password. Users are
  created with `Gradebook.add_user` and logged in with `Gradebook.log_in`,
  which does not check any password.
- Grades are recorded but not computed: there is no final grade or GPA
  calculation.
- Nothing is saved; all records live in memory for as long as the
  `Gradebook` does.