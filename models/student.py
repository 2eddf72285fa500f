# models/student.py

"""
Represents a student on the roster.

Stores the identifying roll number and name alongside running attendance totals
and the most recent exam mark. The letter grade is cached and recomputed every
time the mark changes.

Includes functionality for:
- Recording one class session of attendance
- Setting exam marks with range validation
- Deriving the attendance percentage
- Serializing to and from a single whitespace-separated line of text

Fields can only be changed through `record_attendance()`, `set_marks()`, and
`restore()`. There are no setters.
"""

from __future__ import annotations

from enum import Enum

import core.formatters as formatters
from core.errors import ValidationError

MIN_MARKS = 0.0
MAX_MARKS = 100.0

RECORD_FIELD_COUNT = 5


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    FAIL = "Fail"
    NOT_AVAILABLE = "N/A"


class Student:

    def __init__(self, roll_number: int, name: str):
        self._roll_number: int = roll_number
        self._name: str = Student.validate_name_input(name)
        self._total_classes: int = 0
        self._attended_classes: int = 0
        self._marks: float = 0.0
        self._grade: Grade = Grade.NOT_AVAILABLE

    # === properties ===

    @property
    def roll_number(self) -> int:
        return self._roll_number

    @property
    def name(self) -> str:
        return self._name

    @property
    def total_classes(self) -> int:
        return self._total_classes

    @property
    def attended_classes(self) -> int:
        return self._attended_classes

    @property
    def marks(self) -> float:
        return self._marks

    @property
    def grade(self) -> str:
        return self._grade.value

    @property
    def attendance_percent(self) -> float:
        if self._total_classes == 0:
            return 0.0

        return self._attended_classes / self._total_classes * 100.0

    # === public classmethods ===

    @classmethod
    def restore(
        cls,
        roll_number: int,
        name: str,
        total_classes: int,
        attended_classes: int,
        marks: float,
    ) -> Student:
        """
        Rebuilds a `Student` from persisted values.

        Args:
            roll_number (int): The student's roll number.
            name (str): The student's name.
            total_classes (int): Classes held so far.
            attended_classes (int): Classes the student attended.
            marks (float): The latest exam mark.

        Returns:
            A `Student` with every field set and the grade recomputed from `marks`.

        Raises:
            ValidationError: If the name is empty, a count is negative, attended exceeds total, or marks are out of range.

        Notes:
            - Only used while loading. A restored record always carries a computed grade, never "N/A".
        """
        if total_classes < 0 or attended_classes < 0:
            raise ValidationError("Class counts cannot be negative.")

        if attended_classes > total_classes:
            raise ValidationError(
                f"Attended classes ({attended_classes}) cannot exceed total classes ({total_classes})."
            )

        student = cls(roll_number, name)
        student._total_classes = total_classes
        student._attended_classes = attended_classes
        student._marks = Student.validate_marks_input(marks)
        student._grade = Student.calculate_grade(student._marks)

        return student

    # === persistence and import ===

    def to_record_line(self) -> str:
        # names containing whitespace will not survive a reload
        return " ".join(
            [
                str(self._roll_number),
                self._name,
                str(self._total_classes),
                str(self._attended_classes),
                formatters.format_number(self._marks),
            ]
        )

    @classmethod
    def from_record_fields(cls, record_fields: list[str]) -> Student:
        """
        Parses one group of persisted fields into a `Student`.

        Args:
            record_fields (list[str]): Exactly five tokens: roll, name, total, attended, marks.

        Returns:
            The restored `Student`.

        Raises:
            ValueError: If the group has the wrong length or any field fails to parse or validate.
        """
        if len(record_fields) != RECORD_FIELD_COUNT:
            raise ValueError(
                f"Expected {RECORD_FIELD_COUNT} fields, got {len(record_fields)}."
            )

        roll_str, name, total_str, attended_str, marks_str = record_fields

        return cls.restore(
            roll_number=int(roll_str),
            name=name,
            total_classes=int(total_str),
            attended_classes=int(attended_str),
            marks=float(marks_str),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return (
            f"Student({self._roll_number}, {self._name}, {self._total_classes}, "
            f"{self._attended_classes}, {self._marks}, {self._grade.value})"
        )

    def __str__(self) -> str:
        return f"STUDENT: Roll {self._roll_number} - {self._name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return (
            self._roll_number == other._roll_number
            and self._name == other._name
            and self._total_classes == other._total_classes
            and self._attended_classes == other._attended_classes
            and self._marks == other._marks
            and self._grade == other._grade
        )

    __hash__ = None  # type: ignore[assignment]

    # === data manipulators ===

    def record_attendance(self, present: bool) -> None:
        self._total_classes += 1

        if present:
            self._attended_classes += 1

    def set_marks(self, marks: float) -> None:
        self._marks = Student.validate_marks_input(marks)
        self._grade = Student.calculate_grade(self._marks)

    # === data validators ===

    @staticmethod
    def calculate_grade(marks: float) -> Grade:
        if marks >= 85:
            return Grade.A
        elif marks >= 70:
            return Grade.B
        elif marks >= 50:
            return Grade.C
        else:
            return Grade.FAIL

    @staticmethod
    def validate_marks_input(marks: float) -> float:
        """
        Validates an exam mark.

        Args:
            marks (float): The mark to validate.

        Returns:
            The mark as a float.

        Raises:
            ValidationError: If the mark is not a number or falls outside [0, 100].
        """
        try:
            marks = float(marks)
        except (TypeError, ValueError):
            raise ValidationError(f"Marks must be a number, got {marks!r}.")

        # also rejects NaN
        if not MIN_MARKS <= marks <= MAX_MARKS:
            raise ValidationError("Marks must be between 0 and 100.")

        return marks

    @staticmethod
    def validate_name_input(name: str) -> str:
        if not isinstance(name, str) or name.strip() == "":
            raise ValidationError("Name cannot be empty.")

        return name
