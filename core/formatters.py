# core/formatters.py

# all pure text utilities
# must never import from models!

import datetime
from collections.abc import Iterable

# === generic text formatters ===


def format_numbered_list(items: Iterable[str], empty_text: str = "[NONE]") -> str:
    lines = [f"{i}. {item}" for i, item in enumerate(items, 1)]

    return "\n".join(lines) if lines else empty_text


# === date formatters ===


def format_class_date_long(class_date: datetime.date) -> str:
    return f"{class_date.strftime('%A, %B %d, %Y')}"


# === assignment formatters ===


def format_completion_status(completed: bool) -> str:
    return "Completed" if completed else "Not completed"


def format_assignment_status(
    assignment_name: str,
    rows: Iterable[tuple[str, str, bool]],
) -> str:
    """
    Renders the completion summary for one assignment.

    Args:
        assignment_name (str): The display name of the assignment.
        rows (Iterable[tuple[str, str, bool]]): (student id, student name, completed) triples, in display order.

    Returns:
        A header line followed by one line per student, or a placeholder line when there are no students.
    """
    header = f"Assignment: {assignment_name}"
    lines = [
        f"{student_id} {name}: {format_completion_status(completed)}"
        for student_id, name, completed in rows
    ]

    if not lines:
        lines = ["[NO STUDENTS]"]

    return "\n".join([header, *lines])
