# tests/test_tutorial.py

import datetime

import pytest

from core.exceptions import DuplicateStudentError, StudentNotFoundError
from models.student import StudentId, TutorialClass
from models.tutorial import Tutorial
from models.tutorial_list import TutorialList


def test_set_attendance_requires_rostered_student(sample_tutorial, class_date):
    student_id = StudentId("A0001")

    assert not sample_tutorial.set_attendance(class_date, student_id)
    assert sample_tutorial.attendance_records == {}

    sample_tutorial.add_student(student_id)

    assert sample_tutorial.set_attendance(class_date, student_id)
    assert sample_tutorial.attendance_on(class_date, student_id) is True


def test_attendance_for_date_reports_unmarked(sample_tutorial, class_date):
    sample_tutorial.add_student(StudentId("A0001"))
    sample_tutorial.add_student(StudentId("A0002"))
    sample_tutorial.set_attendance(class_date, StudentId("A0002"), present=False)

    assert sample_tutorial.attendance_for_date(class_date) == {
        StudentId("A0001"): None,
        StudentId("A0002"): False,
    }


def test_add_student_twice_fails(sample_tutorial):
    sample_tutorial.add_student(StudentId("A0001"))

    with pytest.raises(DuplicateStudentError):
        sample_tutorial.add_student(StudentId("A0001"))

    assert sample_tutorial.roster == (StudentId("A0001"),)


def test_none_roster_and_attendance_arguments_are_rejected(sample_tutorial, class_date):
    sample_tutorial.add_student(StudentId("A0001"))

    with pytest.raises(TypeError):
        sample_tutorial.add_student(None)

    with pytest.raises(TypeError):
        sample_tutorial.set_attendance(None, StudentId("A0001"))

    with pytest.raises(TypeError):
        sample_tutorial.set_attendance(class_date, None)

    assert sample_tutorial.roster == (StudentId("A0001"),)
    assert sample_tutorial.attendance_records == {}
    assert sample_tutorial.class_dates == []


def test_remove_student_clears_attendance(sample_tutorial, class_date):
    sample_tutorial.add_student(StudentId("A0001"))
    sample_tutorial.set_attendance(class_date, StudentId("A0001"))

    sample_tutorial.remove_student(StudentId("A0001"))

    assert not sample_tutorial.has_student(StudentId("A0001"))
    assert sample_tutorial.attendance_records == {}

    with pytest.raises(StudentNotFoundError):
        sample_tutorial.remove_student(StudentId("A0001"))


def test_class_dates_are_sorted_and_unique(sample_tutorial):
    sample_tutorial.add_student(StudentId("A0001"))
    sample_tutorial.add_student(StudentId("A0002"))
    sample_tutorial.set_attendance(datetime.date(2024, 2, 1), StudentId("A0001"))
    sample_tutorial.set_attendance(datetime.date(2024, 1, 1), StudentId("A0001"))
    sample_tutorial.set_attendance(datetime.date(2024, 1, 1), StudentId("A0002"))

    assert sample_tutorial.class_dates == [
        datetime.date(2024, 1, 1),
        datetime.date(2024, 2, 1),
    ]


def test_tutorial_from_dict():
    tutorial = Tutorial.from_dict(
        {
            "tutorial_class": "t02",
            "roster": ["A0001"],
            "attendance": [
                {"date": "2024-01-01", "student_id": "A0001", "present": True},
            ],
        }
    )

    assert tutorial.tutorial_class == TutorialClass("T02")
    assert tutorial.attendance_on(datetime.date(2024, 1, 1), StudentId("A0001"))
    assert Tutorial.from_dict(tutorial.to_dict()) == tutorial


def test_tutorial_from_dict_rejects_unrostered_attendance():
    with pytest.raises(ValueError):
        Tutorial.from_dict(
            {
                "tutorial_class": "T02",
                "roster": [],
                "attendance": [
                    {"date": "2024-01-01", "student_id": "A0001", "present": True},
                ],
            }
        )


# --- tutorial list ---


def test_tutorial_list_set_attendance_unknown_class(sample_tutorial, class_date):
    tutorials = TutorialList([sample_tutorial])
    sample_tutorial.add_student(StudentId("A0001"))
    before = Tutorial.from_dict(sample_tutorial.to_dict())

    assert not tutorials.set_attendance(
        TutorialClass("T99"), class_date, StudentId("A0001")
    )
    assert sample_tutorial == before


def test_tutorial_list_has_tutorial_by_class_or_record(sample_tutorial):
    tutorials = TutorialList([sample_tutorial])

    assert tutorials.has_tutorial(sample_tutorial)
    assert tutorials.has_tutorial(TutorialClass("T01"))
    assert not tutorials.has_tutorial(TutorialClass("T02"))


def test_tutorial_list_reset_data(sample_tutorial):
    tutorials = TutorialList([Tutorial(TutorialClass("T05"))])

    tutorials.reset_data(TutorialList([sample_tutorial]))

    assert tutorials.tutorials == (sample_tutorial,)


def test_tutorial_list_reset_data_copies_tutorials(sample_tutorial, class_date):
    source = TutorialList([sample_tutorial])
    tutorials = TutorialList()

    tutorials.reset_data(source)
    tutorials.find_tutorial(TutorialClass("T01")).add_student(StudentId("A0001"))
    tutorials.set_attendance(TutorialClass("T01"), class_date, StudentId("A0001"))

    assert sample_tutorial.roster == ()
    assert sample_tutorial.attendance_records == {}
    assert tutorials.find_tutorial(TutorialClass("T01")) is not sample_tutorial


def test_tutorial_list_rejects_none_tutorial():
    tutorials = TutorialList()

    with pytest.raises(TypeError):
        tutorials.add_tutorial(None)

    assert len(tutorials) == 0
