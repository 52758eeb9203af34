# models/address_book.py

"""
The AddressBook owns the canonical, ordered list of `Student` records.

Invariant: no two students share a `StudentId`. Every mutator checks its preconditions before
touching the list, so a failed call leaves the book exactly as it was.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from core.exceptions import DuplicateStudentError, StudentNotFoundError
from core.utils import require_all_non_null, require_non_null
from models.student import Student, StudentId


class AddressBook:

    def __init__(self, students: Iterable[Student] | None = None):
        self._students: list[Student] = []

        if students is not None:
            self.set_students(students)

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        """Read-only snapshot of the student list, in insertion order."""
        return tuple(self._students)

    # === data accessors ===

    def has_student(self, student: Student) -> bool:
        return any(s.is_same_student(student) for s in self._students)

    def has_student_id(self, student_id: StudentId) -> bool:
        return self.find_student_by_id(student_id) is not None

    def find_student_by_id(self, student_id: StudentId) -> Student | None:
        return next((s for s in self._students if s.student_id == student_id), None)

    # === data manipulators ===

    def add_student(self, student: Student) -> None:
        """
        Appends a student to the address book.

        Raises:
            DuplicateStudentError: If a student with the same ID already exists.
        """
        require_non_null(student, "student")
        if self.has_student(student):
            raise DuplicateStudentError(
                f"A student with the ID '{student.student_id}' already exists."
            )
        self._students.append(student)

    def remove_student(self, student: Student) -> None:
        """
        Removes the student with the same identity as `student`.

        Raises:
            StudentNotFoundError: If no such student exists.
        """
        index = self._index_of(student)
        del self._students[index]

    def set_student(self, target: Student, edited: Student) -> None:
        """
        Replaces `target` with `edited`, keeping its position in the list.

        Raises:
            StudentNotFoundError: If `target` is not in the address book.
            DuplicateStudentError: If `edited` takes the ID of a different existing student.
        """
        require_all_non_null(target=target, edited=edited)
        index = self._index_of(target)

        if not target.is_same_student(edited) and self.has_student(edited):
            raise DuplicateStudentError(
                f"A student with the ID '{edited.student_id}' already exists."
            )
        self._students[index] = edited

    def set_students(self, students: Iterable[Student]) -> None:
        """
        Replaces the whole student list.

        Raises:
            DuplicateStudentError: If the incoming students contain a repeated ID; the book is left untouched.
        """
        incoming = list(students)
        seen: set[StudentId] = set()

        for student in incoming:
            require_non_null(student, "student")
            if student.student_id in seen:
                raise DuplicateStudentError(
                    f"Duplicate student ID '{student.student_id}' in incoming data."
                )
            seen.add(student.student_id)

        self._students = incoming

    def reset_data(self, new_data: AddressBook | ReadOnlyAddressBook) -> None:
        self.set_students(new_data.students)

    # === helper methods ===

    def _index_of(self, student: Student) -> int:
        for i, s in enumerate(self._students):
            if s.is_same_student(student):
                return i
        raise StudentNotFoundError(f"No student with the ID '{student.student_id}'.")

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {"students": [s.to_dict() for s in self._students]}

    @classmethod
    def from_dict(cls, data: dict) -> AddressBook:
        return cls(Student.from_dict(raw) for raw in data.get("students", []))

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(tuple(self._students))

    def __repr__(self) -> str:
        return f"AddressBook({len(self._students)} students)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._students == other._students


class ReadOnlyAddressBook:
    """
    A query-only view of an `AddressBook`, handed out by `ModelManager` for display and serialization.

    Mutations must go through the facade so the filtered student view is refreshed.
    """

    def __init__(self, book: AddressBook):
        self._book = book

    @property
    def students(self) -> tuple[Student, ...]:
        return self._book.students

    def has_student(self, student: Student) -> bool:
        return self._book.has_student(student)

    def has_student_id(self, student_id: StudentId) -> bool:
        return self._book.has_student_id(student_id)

    def find_student_by_id(self, student_id: StudentId) -> Student | None:
        return self._book.find_student_by_id(student_id)

    def to_dict(self) -> dict:
        return self._book.to_dict()

    def __len__(self) -> int:
        return len(self._book)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._book)

    def __repr__(self) -> str:
        return f"ReadOnlyAddressBook({len(self._book)} students)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (AddressBook, ReadOnlyAddressBook)):
            return NotImplemented
        return self.students == other.students
