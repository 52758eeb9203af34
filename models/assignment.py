# models/assignment.py

"""
The Assignment model represents a piece of coursework whose completion is tracked per student.
"""

from __future__ import annotations

from typing import Any

from core.utils import normalize
from models.student import StudentId


class Assignment:

    def __init__(
        self,
        name: str,
        description: str = "",
        statuses: dict[StudentId, bool] | None = None,
    ):
        # name is the identity of an assignment and cannot change
        self._name = Assignment.validate_name_input(name)
        self._description = description.strip()
        self._statuses: dict[StudentId, bool] = dict(statuses or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, description: str) -> None:
        self._description = description.strip()

    @property
    def statuses(self) -> dict[StudentId, bool]:
        return self._statuses.copy()

    def is_same_assignment(self, other: Assignment | None) -> bool:
        if other is self:
            return True
        return other is not None and normalize(other.name) == normalize(self._name)

    def status_of(self, student_id: StudentId) -> bool:
        return self._statuses.get(student_id, False)

    def set_status(self, student_id: StudentId, completed: bool) -> None:
        self._statuses[student_id] = completed

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "description": self._description,
            "statuses": {
                student_id.value: completed
                for student_id, completed in self._statuses.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            statuses={
                StudentId(raw_id): bool(completed)
                for raw_id, completed in data.get("statuses", {}).items()
            },
        )

    def __repr__(self) -> str:
        return f"Assignment({self._name}, {len(self._statuses)} statuses)"

    def __str__(self) -> str:
        return f"ASSIGNMENT: {self._name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented
        return (
            self._name == other._name
            and self._description == other._description
            and self._statuses == other._statuses
        )

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        """
        Validates and normalizes an `Assignment` name.

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the name is blank after stripping whitespace.
        """
        if not isinstance(name, str):
            raise TypeError("Invalid input. Assignment name must be a string.")

        name = name.strip()
        if not name:
            raise ValueError("Invalid input. Assignment name cannot be blank.")
        return name
