# tests/conftest.py

import datetime

import pytest

from models.address_book import AddressBook
from models.assignment import Assignment
from models.model_manager import ModelManager
from models.student import Student, StudentId, TutorialClass
from models.tutorial import Tutorial


@pytest.fixture
def sample_student():
    return Student(
        StudentId("A0001"), "Sean Cameron", "scameron@mmm.edu", TutorialClass("T01")
    )


@pytest.fixture
def second_student():
    return Student(StudentId("A0002"), "Paul Atreides", "patreides@mmm.edu")


@pytest.fixture
def sample_tutorial():
    return Tutorial(TutorialClass("T01"))


@pytest.fixture
def sample_assignment():
    return Assignment("Lab 1", "Warm-up exercises")


@pytest.fixture
def class_date():
    return datetime.date(2024, 1, 1)


@pytest.fixture
def sample_address_book(sample_student, second_student):
    return AddressBook([sample_student, second_student])


@pytest.fixture
def empty_model():
    return ModelManager()


@pytest.fixture
def populated_model(sample_address_book, sample_tutorial, sample_assignment):
    model = ModelManager(address_book=sample_address_book)
    model.add_tutorial(sample_tutorial)
    model.add_assignment(sample_assignment)
    return model
