# models/tutorial_list.py

"""
The TutorialList owns every `Tutorial` and enforces that no two share a `TutorialClass`.

Roster and attendance changes are routed through here so that lookups by tutorial class
happen in one place.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Iterator

from core.exceptions import DuplicateTutorialError, TutorialNotFoundError
from core.utils import require_non_null
from models.student import Student, StudentId, TutorialClass
from models.tutorial import Tutorial


class TutorialList:

    def __init__(self, tutorials: Iterable[Tutorial] | None = None):
        self._tutorials: list[Tutorial] = []

        for tutorial in tutorials or []:
            self.add_tutorial(tutorial)

    @property
    def tutorials(self) -> tuple[Tutorial, ...]:
        return tuple(self._tutorials)

    # === data accessors ===

    def has_tutorial(self, tutorial: Tutorial | TutorialClass) -> bool:
        tutorial_class = (
            tutorial.tutorial_class if isinstance(tutorial, Tutorial) else tutorial
        )
        return self.find_tutorial(tutorial_class) is not None

    def find_tutorial(self, tutorial_class: TutorialClass) -> Tutorial | None:
        return next(
            (t for t in self._tutorials if t.tutorial_class == tutorial_class), None
        )

    # === data manipulators ===

    def add_tutorial(self, tutorial: Tutorial) -> None:
        require_non_null(tutorial, "tutorial")
        if self.has_tutorial(tutorial):
            raise DuplicateTutorialError(
                f"Tutorial {tutorial.tutorial_class} already exists."
            )
        self._tutorials.append(tutorial)

    def delete_tutorial(self, tutorial: Tutorial) -> None:
        existing = self.find_tutorial(tutorial.tutorial_class)
        if existing is None:
            raise TutorialNotFoundError(
                f"Tutorial {tutorial.tutorial_class} does not exist."
            )
        self._tutorials.remove(existing)

    def assign_student(self, student: Student, tutorial_class: TutorialClass) -> None:
        """
        Adds `student` to the roster of the tutorial identified by `tutorial_class`.

        Raises:
            TutorialNotFoundError: If no tutorial has that class.
            DuplicateStudentError: If the student is already on that roster.
        """
        tutorial = self.find_tutorial(tutorial_class)
        if tutorial is None:
            raise TutorialNotFoundError(f"Tutorial {tutorial_class} does not exist.")
        tutorial.add_student(student.student_id)

    def set_attendance(
        self,
        tutorial_class: TutorialClass,
        date: datetime.date,
        student_id: StudentId,
        present: bool = True,
    ) -> bool:
        """
        Records attendance in the first tutorial matching `tutorial_class`.

        Returns:
            True if attendance was recorded. False if no tutorial matches or the student
            is not on its roster; in both cases nothing is changed.
        """
        tutorial = self.find_tutorial(tutorial_class)
        if tutorial is None:
            return False
        return tutorial.set_attendance(date, student_id, present)

    def reset_data(self, new_data: TutorialList) -> None:
        """Replaces every tutorial with an independent copy of those in `new_data`."""
        require_non_null(new_data, "new_data")
        replacement = TutorialList(
            Tutorial.from_dict(t.to_dict()) for t in new_data.tutorials
        )
        self._tutorials = replacement._tutorials

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {"tutorials": [t.to_dict() for t in self._tutorials]}

    @classmethod
    def from_dict(cls, data: dict) -> TutorialList:
        return cls(Tutorial.from_dict(raw) for raw in data.get("tutorials", []))

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._tutorials)

    def __iter__(self) -> Iterator[Tutorial]:
        return iter(tuple(self._tutorials))

    def __repr__(self) -> str:
        return f"TutorialList({', '.join(str(t.tutorial_class) for t in self._tutorials)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TutorialList):
            return NotImplemented
        return self._tutorials == other._tutorials
