# models/student.py

"""
Represents a student tracked by the address book.

Stores identifying information such as the student ID, name, and email, along with the
tutorial class the student is allocated to (if any) and a free-text remark.

Includes functionality for:
- Validating and normalizing student IDs, tutorial classes, names, and emails
- Identity checks by student ID (`is_same_student`) alongside full structural equality
- Producing edited copies via `copy_with()`, since students are replaced rather than patched
- Serializing to and from JSON-compatible dictionaries

`StudentId` and `TutorialClass` are small immutable value types so they can be used as
dictionary keys by `Tutorial` and `Assignment` records.
"""

from __future__ import annotations

import re
from typing import Any


class StudentId:

    def __init__(self, value: str):
        self._value = StudentId.validate_student_id_input(value)

    @property
    def value(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"StudentId({self._value})"

    def __str__(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentId):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @staticmethod
    def validate_student_id_input(value: Any) -> str:
        """
        Validates and normalizes a student ID.

        Normalizes the input by stripping whitespace and converting to uppercase, then ensures it is
        one letter, four to seven digits, and an optional trailing check letter (e.g. A0001, A0123456X).

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the ID does not conform to the expected format.
        """
        if not isinstance(value, str):
            raise TypeError("Invalid input. Student ID must be a string.")

        value = value.strip().upper()
        if not re.fullmatch(r"[A-Z]\d{4,7}[A-Z]?", value):
            raise ValueError(
                "Invalid input. Student ID must be a letter, 4-7 digits, and an optional letter."
            )
        return value


class TutorialClass:

    def __init__(self, value: str):
        self._value = TutorialClass.validate_tutorial_class_input(value)

    @property
    def value(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"TutorialClass({self._value})"

    def __str__(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TutorialClass):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: TutorialClass) -> bool:
        return self._value < other._value

    @staticmethod
    def validate_tutorial_class_input(value: Any) -> str:
        """
        Validates and normalizes a tutorial class code such as T01 or G10.

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the code is not one or two letters followed by one to three digits.
        """
        if not isinstance(value, str):
            raise TypeError("Invalid input. Tutorial class must be a string.")

        value = value.strip().upper()
        if not re.fullmatch(r"[A-Z]{1,2}\d{1,3}", value):
            raise ValueError(
                "Invalid input. Tutorial class must be 1-2 letters followed by 1-3 digits."
            )
        return value


class Student:

    def __init__(
        self,
        student_id: StudentId,
        name: str,
        email: str,
        tutorial_class: TutorialClass | None = None,
        remark: str = "",
    ):
        self._student_id: StudentId = Student.validate_student_id(student_id)
        self._name: str = Student.validate_name_input(name)
        self._email: str = Student.validate_email_input(email)
        self._tutorial_class: TutorialClass | None = Student.validate_tutorial_class(
            tutorial_class
        )
        self._remark: str = remark.strip()

    # === properties ===

    @property
    def student_id(self) -> StudentId:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def tutorial_class(self) -> TutorialClass | None:
        return self._tutorial_class

    @property
    def remark(self) -> str:
        return self._remark

    # === identity and editing ===

    def is_same_student(self, other: Student | None) -> bool:
        """Returns True if `other` has the same student ID, the weaker notion of equality used for uniqueness."""
        if other is self:
            return True
        return other is not None and other.student_id == self._student_id

    def copy_with(self, **changes: Any) -> Student:
        """
        Returns an edited copy of this student; unspecified fields carry over.

        Raises:
            TypeError: If an unknown field name is given.
        """
        fields = {
            "student_id": self._student_id,
            "name": self._name,
            "email": self._email,
            "tutorial_class": self._tutorial_class,
            "remark": self._remark,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown student field(s): {', '.join(sorted(unknown))}")

        fields.update(changes)
        return Student(**fields)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "student_id": self._student_id.value,
            "name": self._name,
            "email": self._email,
            "tutorial_class": (
                self._tutorial_class.value if self._tutorial_class else None
            ),
            "remark": self._remark,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        tutorial_class_raw = data.get("tutorial_class")

        return cls(
            student_id=StudentId(data["student_id"]),
            name=data["name"],
            email=data["email"],
            tutorial_class=(
                TutorialClass(tutorial_class_raw) if tutorial_class_raw else None
            ),
            remark=data.get("remark", ""),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._student_id}, {self._name}, {self._email}, {self._tutorial_class})"

    def __str__(self) -> str:
        tutorial = self._tutorial_class or "[UNASSIGNED]"
        return f"STUDENT: {self._name} - (ID: {self._student_id}, Tutorial: {tutorial})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (
            self._student_id == other._student_id
            and self._name == other._name
            and self._email == other._email
            and self._tutorial_class == other._tutorial_class
            and self._remark == other._remark
        )

    def __hash__(self) -> int:
        return hash((self._student_id, self._name, self._email, self._tutorial_class))

    # === data validators ===

    @staticmethod
    def validate_student_id(student_id: Any) -> StudentId:
        """
        Ensures the student ID is a parsed `StudentId` rather than a raw string.

        Raises:
            TypeError: If the input is not a `StudentId`.
        """
        if not isinstance(student_id, StudentId):
            raise TypeError("Invalid input. Student ID must be a StudentId.")
        return student_id

    @staticmethod
    def validate_tutorial_class(tutorial_class: Any) -> TutorialClass | None:
        if tutorial_class is not None and not isinstance(tutorial_class, TutorialClass):
            raise TypeError("Invalid input. Tutorial class must be a TutorialClass or None.")
        return tutorial_class

    @staticmethod
    def validate_name_input(name: Any) -> str:
        """
        Validates and normalizes a student name by stripping surrounding whitespace.

        Raises:
            TypeError: If the input is not a string.
            ValueError: If the name is blank.
        """
        if not isinstance(name, str):
            raise TypeError("Invalid input. Name must be a string.")

        name = name.strip()
        if not name:
            raise ValueError("Invalid input. Name cannot be blank.")
        return name

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a Student email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email
