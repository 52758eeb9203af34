# models/tutorial.py

"""
Represents a tutorial class and the students rostered into it.

Each `Tutorial` is identified by its `TutorialClass` and owns:
- a roster of `StudentId` values, in the order students were assigned
- attendance records keyed by `(datetime.date, StudentId)` mapping to a present/absent boolean

Attendance may only be recorded for rostered students; `set_attendance()` reports whether the
record was written instead of raising, so callers can treat an unrostered student as "nothing happened".
"""

from __future__ import annotations

import datetime

from core.exceptions import DuplicateStudentError, StudentNotFoundError
from core.utils import require_all_non_null, require_non_null
from models.student import StudentId, TutorialClass


class Tutorial:

    def __init__(
        self,
        tutorial_class: TutorialClass,
        roster: list[StudentId] | None = None,
    ):
        self._tutorial_class: TutorialClass = tutorial_class
        self._roster: list[StudentId] = []
        self._attendance: dict[tuple[datetime.date, StudentId], bool] = {}

        for student_id in roster or []:
            self.add_student(student_id)

    # === properties ===

    @property
    def tutorial_class(self) -> TutorialClass:
        return self._tutorial_class

    @property
    def roster(self) -> tuple[StudentId, ...]:
        return tuple(self._roster)

    @property
    def attendance_records(self) -> dict[tuple[datetime.date, StudentId], bool]:
        return self._attendance.copy()

    @property
    def class_dates(self) -> list[datetime.date]:
        return sorted({date for date, _ in self._attendance})

    def is_same_tutorial(self, other: Tutorial | None) -> bool:
        if other is self:
            return True
        return other is not None and other.tutorial_class == self._tutorial_class

    # === roster methods ===

    def has_student(self, student_id: StudentId) -> bool:
        return student_id in self._roster

    def add_student(self, student_id: StudentId) -> None:
        require_non_null(student_id, "student_id")
        if self.has_student(student_id):
            raise DuplicateStudentError(
                f"Student {student_id} is already in tutorial {self._tutorial_class}."
            )
        self._roster.append(student_id)

    def remove_student(self, student_id: StudentId) -> None:
        """
        Removes a student from the roster along with all of their attendance records.

        Raises:
            StudentNotFoundError: If the student is not on the roster.
        """
        if not self.has_student(student_id):
            raise StudentNotFoundError(
                f"Student {student_id} is not in tutorial {self._tutorial_class}."
            )
        self._roster.remove(student_id)
        self._attendance = {
            key: present for key, present in self._attendance.items()
            if key[1] != student_id
        }

    # --- attendance methods ---

    def set_attendance(
        self, date: datetime.date, student_id: StudentId, present: bool = True
    ) -> bool:
        """
        Records attendance for a rostered student on the given date.

        Returns:
            True if the record was written, False if the student is not on this roster (nothing is changed).
        """
        require_all_non_null(date=date, student_id=student_id)
        if not self.has_student(student_id):
            return False

        self._attendance[(date, student_id)] = present
        return True

    def attendance_on(self, date: datetime.date, student_id: StudentId) -> bool | None:
        return self._attendance.get((date, student_id))

    def attendance_for_date(self, date: datetime.date) -> dict[StudentId, bool | None]:
        return {
            student_id: self.attendance_on(date, student_id)
            for student_id in self._roster
        }

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "tutorial_class": self._tutorial_class.value,
            "roster": [student_id.value for student_id in self._roster],
            "attendance": [
                {
                    "date": date.isoformat(),
                    "student_id": student_id.value,
                    "present": present,
                }
                for (date, student_id), present in self._attendance.items()
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Tutorial:
        tutorial = cls(
            tutorial_class=TutorialClass(data["tutorial_class"]),
            roster=[StudentId(raw) for raw in data.get("roster", [])],
        )

        for record in data.get("attendance", []):
            student_id = StudentId(record["student_id"])
            if not tutorial.has_student(student_id):
                raise ValueError(
                    f"Attendance recorded for unrostered student {student_id} in {tutorial.tutorial_class}."
                )
            tutorial.set_attendance(
                datetime.date.fromisoformat(record["date"]),
                student_id,
                record["present"],
            )

        return tutorial

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Tutorial({self._tutorial_class}, {len(self._roster)} students)"

    def __str__(self) -> str:
        return f"TUTORIAL: {self._tutorial_class} - ({len(self._roster)} students)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tutorial):
            return NotImplemented
        return (
            self._tutorial_class == other._tutorial_class
            and self._roster == other._roster
            and self._attendance == other._attendance
        )
