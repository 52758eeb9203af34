# models/filtered_list.py

"""
A live, predicate-filtered projection of the students in an `AddressBook`.

The projection caches its filtered snapshot and recomputes it eagerly whenever the predicate
changes or `refresh()` is called. Subscribers (e.g. a GUI list panel) are called with the new
snapshot after every recompute.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import overload

from models.address_book import AddressBook
from models.student import Student

StudentPredicate = Callable[[Student], bool]
Listener = Callable[[tuple[Student, ...]], None]


def PREDICATE_SHOW_ALL_STUDENTS(student: Student) -> bool:
    return True


class FilteredStudentList:

    def __init__(
        self,
        source: AddressBook,
        predicate: StudentPredicate = PREDICATE_SHOW_ALL_STUDENTS,
    ):
        self._source = source
        self._predicate: StudentPredicate = predicate
        self._listeners: list[Listener] = []
        self._snapshot: tuple[Student, ...] = ()
        self.refresh()

    # === properties ===

    @property
    def predicate(self) -> StudentPredicate:
        return self._predicate

    # === observer methods ===

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Registers `listener` to be called with every new snapshot.

        Returns:
            A callable that removes the listener; calling it more than once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # === data manipulators ===

    def set_predicate(self, predicate: StudentPredicate) -> None:
        self._predicate = predicate
        self.refresh()

    def refresh(self) -> None:
        """Recomputes the snapshot from the source with the current predicate and notifies listeners."""
        self._snapshot = tuple(s for s in self._source if self._predicate(s))

        for listener in list(self._listeners):
            listener(self._snapshot)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._snapshot)

    @overload
    def __getitem__(self, index: int) -> Student: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Student, ...]: ...

    def __getitem__(self, index):
        return self._snapshot[index]

    def __repr__(self) -> str:
        return f"FilteredStudentList({len(self._snapshot)} of {len(self._source)} students)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilteredStudentList):
            return NotImplemented
        return self._snapshot == other._snapshot
