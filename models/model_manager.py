# models/model_manager.py

"""
The ModelManager is the single entry point the command layer uses to query and mutate records.

It composes one `AddressBook`, one `TutorialList`, one `AssignmentList`, and the `UserPrefs`, and
maintains a `FilteredStudentList` projection of the address book for display.

Every public method rejects None arguments with a TypeError before doing any work. Mutators return
a `Response`; collection exceptions are translated into failures with an `ErrorCode`, and a failed
call never leaves partial changes behind. Attendance marking is the one exception to this contract:
`set_student_attendance()` answers with a plain bool and treats an unknown tutorial as "not marked".
"""

from __future__ import annotations

import datetime
from collections.abc import Callable

import core.formatters as formatters
from core.context import AppContext
from core.exceptions import DuplicateRecordError, RecordNotFoundError
from core.response import ErrorCode, Response
from core.utils import require_all_non_null, require_non_null
from models.address_book import AddressBook, ReadOnlyAddressBook
from models.assignment import Assignment
from models.assignment_list import AssignmentList
from models.filtered_list import (
    PREDICATE_SHOW_ALL_STUDENTS,
    FilteredStudentList,
    StudentPredicate,
)
from models.student import Student, StudentId, TutorialClass
from models.tutorial import Tutorial
from models.tutorial_list import TutorialList
from models.types import RecordType
from models.user_prefs import GuiSettings, UserPrefs


class ModelManager:

    def __init__(
        self,
        address_book: AddressBook | ReadOnlyAddressBook | None = None,
        user_prefs: UserPrefs | None = None,
        assignment_list: AssignmentList | None = None,
        tutorial_list: TutorialList | None = None,
        context: AppContext | None = None,
    ):
        """
        Initializes a ModelManager with the given collections, each defaulting to empty.

        Args:
            address_book (AddressBook | ReadOnlyAddressBook | None): Copied; later changes to the argument do not affect the model.
            user_prefs (UserPrefs | None): Copied.
            assignment_list (AssignmentList | None): Adopted as-is and mutated in place.
            tutorial_list (TutorialList | None): Adopted as-is and mutated in place.
            context (AppContext | None): Supplies the logger; a default context is created if omitted.
        """
        context = context or AppContext()
        self._logger = context.get_logger("model_manager")

        self._address_book = AddressBook(
            address_book.students if address_book is not None else None
        )
        self._user_prefs = (user_prefs or UserPrefs()).copy()
        self._assignments = (
            assignment_list if assignment_list is not None else AssignmentList()
        )
        self._tutorials = tutorial_list if tutorial_list is not None else TutorialList()
        self._filtered_students = FilteredStudentList(self._address_book)

        self._logger.debug(
            "Initializing with address book: %r, user prefs: %r, assignment list: %r, tutorial list: %r",
            self._address_book,
            self._user_prefs,
            self._assignments,
            self._tutorials,
        )

    # === user prefs ===

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        require_non_null(user_prefs, "user_prefs")
        self._user_prefs.reset_data(user_prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        require_non_null(gui_settings, "gui_settings")
        self._user_prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> str:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, path: str) -> None:
        require_non_null(path, "path")
        self._user_prefs.address_book_file_path = path

    # === address book ===

    @property
    def address_book(self) -> ReadOnlyAddressBook:
        """Query-only view of the students; mutate through the `ModelManager` methods."""
        return ReadOnlyAddressBook(self._address_book)

    def set_address_book(
        self, address_book: AddressBook | ReadOnlyAddressBook
    ) -> Response:
        """
        Replaces every student in the model with the students of `address_book`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the address book was replaced.
                    - False if the incoming data repeats a student ID.
                - error (ErrorCode | None):
                    - `ErrorCode.VALIDATION_FAILED` on a repeated student ID.
                - data (dict | None):
                    - Always empty.

        Notes:
            - The filtered view is refreshed with its current predicate.
        """
        require_non_null(address_book, "address_book")

        response = self._apply(
            lambda: self._address_book.reset_data(address_book),
            "Address book replaced.",
        )
        if response.success:
            self._filtered_students.refresh()
        return response

    def has_student(self, student: Student) -> bool:
        require_non_null(student, "student")
        return self._address_book.has_student(student)

    def has_student_with_id(self, student_id: StudentId) -> bool:
        require_non_null(student_id, "student_id")
        return self._address_book.has_student_id(student_id)

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` to the address book and resets the filtered view to show all students.

        Args:
            student (Student): The student to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if a student with the same ID already exists.
                - detail (str | None):
                    - A human-readable description of the outcome.
                - error (ErrorCode | None):
                    - `ErrorCode.VALIDATION_FAILED` if the student ID is not unique.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added student.

        Notes:
            - On failure the address book and the filtered view are left untouched.
        """
        require_non_null(student, "student")

        response = self._apply(
            lambda: self._address_book.add_student(student),
            "Student successfully added.",
            student,
        )
        if response.success:
            self.update_filtered_student_list(PREDICATE_SHOW_ALL_STUDENTS)
        return response

    def delete_student(self, student: Student) -> Response:
        """
        Removes a `Student` from the address book.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` (404) if no student has the same ID.

        Notes:
            - Tutorial rosters and assignment statuses that reference the student are kept.
        """
        require_non_null(student, "student")

        response = self._apply(
            lambda: self._address_book.remove_student(student),
            "Student successfully removed.",
        )
        if response.success:
            self._filtered_students.refresh()
        return response

    def set_student(self, target: Student, edited_student: Student) -> Response:
        """
        Replaces `target` with `edited_student`, keeping its position in the address book.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was replaced.
                    - False if `target` is missing or `edited_student` takes another student's ID.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if `target` is not in the address book.
                    - `ErrorCode.VALIDATION_FAILED` if the edited ID clashes with another student.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The edited student.
        """
        require_all_non_null(target=target, edited_student=edited_student)

        response = self._apply(
            lambda: self._address_book.set_student(target, edited_student),
            "Student successfully updated.",
            edited_student,
        )
        if response.success:
            self._filtered_students.refresh()
        return response

    # === tutorials ===

    @property
    def tutorial_list(self) -> TutorialList:
        return self._tutorials

    def has_tutorial(self, tutorial: Tutorial | TutorialClass) -> bool:
        require_non_null(tutorial, "tutorial")
        return self._tutorials.has_tutorial(tutorial)

    def add_tutorial(self, tutorial: Tutorial) -> Response:
        require_non_null(tutorial, "tutorial")
        return self._apply(
            lambda: self._tutorials.add_tutorial(tutorial),
            "Tutorial successfully added.",
            tutorial,
        )

    def delete_tutorial(self, tutorial: Tutorial) -> Response:
        require_non_null(tutorial, "tutorial")
        return self._apply(
            lambda: self._tutorials.delete_tutorial(tutorial),
            "Tutorial successfully removed.",
        )

    def assign_student(self, student: Student, tutorial_class: TutorialClass) -> Response:
        """
        Adds `student` to the roster of the tutorial identified by `tutorial_class`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added to the roster.
                    - False if the tutorial does not exist or the student is already rostered.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no tutorial has that class.
                    - `ErrorCode.VALIDATION_FAILED` if the student is already on the roster.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the tutorial cannot be found
                    - 400 for other failures

        Notes:
            - The student record itself is not edited; its `tutorial_class` field is the caller's concern.
        """
        require_all_non_null(student=student, tutorial_class=tutorial_class)

        if not self._tutorials.has_tutorial(tutorial_class):
            self._logger.info("Tutorial %s not found for assignment", tutorial_class)
            return Response.not_found(f"Tutorial {tutorial_class} does not exist.")

        return self._apply(
            lambda: self._tutorials.assign_student(student, tutorial_class),
            f"Student {student.student_id} assigned to {tutorial_class}.",
            student,
        )

    def set_student_attendance(
        self,
        student_id: StudentId,
        tutorial_class: TutorialClass,
        date: datetime.date,
    ) -> bool:
        """
        Marks `student_id` present on `date` in the first tutorial matching `tutorial_class`.

        Returns:
            True if attendance was recorded. False if the tutorial does not exist or the student is
            not on its roster; no error is reported in either case and nothing is changed.

        Notes:
            - The filtered view is reset to show all students regardless of the outcome.
        """
        require_all_non_null(
            student_id=student_id, tutorial_class=tutorial_class, date=date
        )

        is_success = self._tutorials.set_attendance(tutorial_class, date, student_id)
        if not is_success:
            self._logger.debug(
                "Attendance not marked for %s in %s on %s",
                student_id,
                tutorial_class,
                formatters.format_class_date_long(date),
            )

        self.update_filtered_student_list(PREDICATE_SHOW_ALL_STUDENTS)
        return is_success

    # === assignments ===

    @property
    def assignment_list(self) -> AssignmentList:
        return self._assignments

    def has_assignment(self, assignment: Assignment) -> bool:
        require_non_null(assignment, "assignment")
        return self._assignments.has_assignment(assignment)

    def add_assignment(self, assignment: Assignment) -> Response:
        require_non_null(assignment, "assignment")
        return self._apply(
            lambda: self._assignments.add_assignment(assignment),
            "Assignment successfully added.",
            assignment,
        )

    def delete_assignment(self, assignment: Assignment) -> Response:
        require_non_null(assignment, "assignment")
        return self._apply(
            lambda: self._assignments.delete_assignment(assignment),
            "Assignment successfully removed.",
        )

    def check_assignment(self, assignment: Assignment) -> Response:
        """
        Summarizes completion of `assignment` across every student in the address book.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the assignment exists.
                    - False otherwise.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if the assignment is unknown.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "summary" (str): One line per student, in address book order.
                    - On failure:
                        - None

        Notes:
            - This method is read-only.
        """
        require_non_null(assignment, "assignment")

        try:
            summary = self._assignments.get_status(
                assignment, self._address_book.students
            )

        except RecordNotFoundError as e:
            self._logger.info("Status check failed: %s", e)
            return Response.not_found(str(e))

        else:
            return Response.succeed(data={"summary": summary})

    def set_assignment_status(
        self, assignment: Assignment, student: Student, completed: bool
    ) -> Response:
        """
        Records whether `student` has completed `assignment`.

        Returns:
            Response: Fails with `ErrorCode.NOT_FOUND` (404) if the assignment is unknown or the student
            is not in the address book; nothing is recorded in either case.
        """
        require_all_non_null(assignment=assignment, student=student, completed=completed)

        if not self._address_book.has_student(student):
            self._logger.info("Student %s not found for status update", student.student_id)
            return Response.not_found(f"No student with the ID '{student.student_id}'.")

        return self._apply(
            lambda: self._assignments.set_status(assignment, student, completed),
            f"Status of {assignment.name} for {student.student_id} set.",
        )

    def list_assignments(self) -> str:
        return str(self._assignments)

    # === filtered student list ===

    @property
    def filtered_student_list(self) -> FilteredStudentList:
        return self._filtered_students

    def update_filtered_student_list(self, predicate: StudentPredicate) -> None:
        require_non_null(predicate, "predicate")
        self._filtered_students.set_predicate(predicate)

    # === helper methods ===

    def _apply(
        self,
        mutation: Callable[[], None],
        success_detail: str,
        record: RecordType | None = None,
    ) -> Response:
        """
        Runs a collection mutation and translates its exceptions into a `Response`.

        Collections validate before mutating, so a raised exception means nothing changed.
        """
        try:
            mutation()

        except RecordNotFoundError as e:
            self._logger.info("Not found: %s", e)
            return Response.not_found(str(e))

        except DuplicateRecordError as e:
            self._logger.info("Uniqueness violated: %s", e)
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        else:
            self._logger.debug(success_detail)
            return Response.succeed(
                detail=success_detail,
                data={"record": record} if record is not None else None,
            )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"ModelManager({self._address_book!r}, {self._tutorials!r}, {self._assignments!r})"

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True

        if not isinstance(other, ModelManager):
            return NotImplemented

        # tutorials are not compared
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and self._filtered_students == other._filtered_students
            and self._assignments == other._assignments
        )
