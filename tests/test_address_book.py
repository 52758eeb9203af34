# tests/test_address_book.py

import pytest

from core.exceptions import DuplicateStudentError, StudentNotFoundError
from models.address_book import AddressBook, ReadOnlyAddressBook
from models.student import Student, StudentId


def make_student(number: int) -> Student:
    return Student(
        StudentId(f"A{number:04d}"), f"Student {number}", f"s{number}@mmm.edu"
    )


def test_add_distinct_students():
    book = AddressBook()
    students = [make_student(n) for n in range(1, 6)]

    for student in students:
        book.add_student(student)

    assert len(book) == len(students)
    assert all(book.has_student_id(s.student_id) for s in students)


def test_add_duplicate_id_leaves_book_unchanged(sample_student):
    book = AddressBook([sample_student])
    clash = Student(StudentId("A0001"), "Other Person", "other@mmm.edu")

    with pytest.raises(DuplicateStudentError):
        book.add_student(clash)

    assert book.students == (sample_student,)


def test_add_and_remove_student(sample_student):
    book = AddressBook()
    book.add_student(sample_student)
    assert book.has_student_id(StudentId("A0001"))

    book.remove_student(sample_student)
    assert not book.has_student_id(StudentId("A0001"))

    with pytest.raises(StudentNotFoundError):
        book.remove_student(sample_student)


def test_set_student_keeps_position(sample_address_book, sample_student):
    edited = make_student(9)

    sample_address_book.set_student(sample_student, edited)

    assert len(sample_address_book) == 2
    assert sample_address_book.students[0] == edited
    assert sample_address_book.has_student(edited)
    assert not sample_address_book.has_student(sample_student)


def test_set_student_same_identity(sample_address_book, sample_student):
    edited = sample_student.copy_with(remark="Quiet")

    sample_address_book.set_student(sample_student, edited)

    assert sample_address_book.students[0].remark == "Quiet"
    assert sample_address_book.has_student(sample_student)


def test_set_student_rejects_missing_target_and_clash(
    sample_address_book, sample_student, second_student
):
    with pytest.raises(StudentNotFoundError):
        sample_address_book.set_student(make_student(7), make_student(8))

    with pytest.raises(DuplicateStudentError):
        sample_address_book.set_student(
            sample_student, second_student.copy_with(name="Clash")
        )

    assert sample_address_book.students[0] == sample_student


def test_set_students_rejects_duplicates(sample_address_book, sample_student):
    with pytest.raises(DuplicateStudentError):
        sample_address_book.set_students([sample_student, sample_student])

    assert len(sample_address_book) == 2


def test_find_student_by_id(sample_address_book, second_student):
    assert sample_address_book.find_student_by_id(StudentId("A0002")) == second_student
    assert sample_address_book.find_student_by_id(StudentId("A0099")) is None


def test_address_book_from_dict(sample_address_book):
    assert AddressBook.from_dict(sample_address_book.to_dict()) == sample_address_book


def test_none_students_are_rejected(sample_address_book, sample_student):
    with pytest.raises(TypeError):
        AddressBook().add_student(None)

    with pytest.raises(TypeError):
        sample_address_book.set_student(sample_student, None)

    with pytest.raises(TypeError):
        sample_address_book.set_students([make_student(7), None])

    assert len(sample_address_book) == 2


# --- read-only view ---


def test_read_only_view_tracks_book(sample_address_book, sample_student):
    view = ReadOnlyAddressBook(sample_address_book)

    sample_address_book.remove_student(sample_student)

    assert len(view) == 1
    assert not view.has_student(sample_student)
    assert view == sample_address_book
    assert view.to_dict() == sample_address_book.to_dict()


def test_read_only_view_has_no_mutators(sample_address_book):
    view = ReadOnlyAddressBook(sample_address_book)

    for name in ("add_student", "remove_student", "set_student", "set_students", "reset_data"):
        assert not hasattr(view, name)
