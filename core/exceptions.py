# core/exceptions.py

"""
Typed exceptions raised by the record collections.

Collections raise these directly; `ModelManager` translates them into `Response` failures.
"""


class TutorbookError(Exception):
    """Base exception for all tutorbook record errors."""


class RecordNotFoundError(TutorbookError, LookupError):
    """Raised when a referenced record does not exist."""


class StudentNotFoundError(RecordNotFoundError):
    pass


class TutorialNotFoundError(RecordNotFoundError):
    pass


class AssignmentNotFoundError(RecordNotFoundError):
    pass


class DuplicateRecordError(TutorbookError, ValueError):
    """Raised when adding a record would break a uniqueness invariant."""


class DuplicateStudentError(DuplicateRecordError):
    pass


class DuplicateTutorialError(DuplicateRecordError):
    pass


class DuplicateAssignmentError(DuplicateRecordError):
    pass
