# models/assignment_list.py

"""
The AssignmentList owns every `Assignment` and the per-student completion statuses they carry.

Assignments passed in by callers are matched by identity (normalized name), so a freshly parsed
`Assignment("Lab 1")` finds the stored record. Unknown assignments raise `AssignmentNotFoundError`;
status reports never fall back to an empty string.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import core.formatters as formatters
from core.exceptions import AssignmentNotFoundError, DuplicateAssignmentError
from core.utils import require_non_null
from models.assignment import Assignment
from models.student import Student


class AssignmentList:

    def __init__(self, assignments: Iterable[Assignment] | None = None):
        self._assignments: list[Assignment] = []

        for assignment in assignments or []:
            self.add_assignment(assignment)

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return tuple(self._assignments)

    # === data accessors ===

    def has_assignment(self, assignment: Assignment) -> bool:
        return self._find(assignment) is not None

    def get_status(self, assignment: Assignment, students: Iterable[Student]) -> str:
        """
        Summarizes completion of `assignment` across `students`.

        Args:
            assignment (Assignment): The assignment to report on, matched by identity.
            students (Iterable[Student]): The students to include, in display order.

        Returns:
            A multi-line summary; students without a recorded status are reported as not completed.

        Raises:
            AssignmentNotFoundError: If the assignment is not in this list.
        """
        stored = self._require(assignment)

        rows = [
            (str(s.student_id), s.name, stored.status_of(s.student_id))
            for s in students
        ]
        return formatters.format_assignment_status(stored.name, rows)

    # === data manipulators ===

    def add_assignment(self, assignment: Assignment) -> None:
        require_non_null(assignment, "assignment")
        if self.has_assignment(assignment):
            raise DuplicateAssignmentError(
                f"An assignment with the name '{assignment.name}' already exists."
            )
        self._assignments.append(assignment)

    def delete_assignment(self, assignment: Assignment) -> None:
        self._assignments.remove(self._require(assignment))

    def set_status(self, assignment: Assignment, student: Student, completed: bool) -> None:
        """
        Records whether `student` has completed `assignment`.

        Raises:
            AssignmentNotFoundError: If the assignment is not in this list.
        """
        self._require(assignment).set_status(student.student_id, completed)

    def reset_data(self, new_data: AssignmentList) -> None:
        """Replaces every assignment with an independent copy of those in `new_data`."""
        require_non_null(new_data, "new_data")
        replacement = AssignmentList(
            Assignment.from_dict(a.to_dict()) for a in new_data.assignments
        )
        self._assignments = replacement._assignments

    # === helper methods ===

    def _find(self, assignment: Assignment) -> Assignment | None:
        return next(
            (a for a in self._assignments if a.is_same_assignment(assignment)), None
        )

    def _require(self, assignment: Assignment) -> Assignment:
        stored = self._find(assignment)
        if stored is None:
            raise AssignmentNotFoundError(
                f"No assignment with the name '{assignment.name}'."
            )
        return stored

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {"assignments": [a.to_dict() for a in self._assignments]}

    @classmethod
    def from_dict(cls, data: dict) -> AssignmentList:
        return cls(Assignment.from_dict(raw) for raw in data.get("assignments", []))

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._assignments)

    def __iter__(self) -> Iterator[Assignment]:
        return iter(tuple(self._assignments))

    def __str__(self) -> str:
        return formatters.format_numbered_list(
            (a.name for a in self._assignments), empty_text="[NO ASSIGNMENTS]"
        )

    def __repr__(self) -> str:
        return f"AssignmentList({len(self._assignments)} assignments)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssignmentList):
            return NotImplemented
        return self._assignments == other._assignments
