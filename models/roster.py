# models/roster.py

"""
The Roster model is the central data object of the program and the "source of truth" for all student records.

Students are kept in a list whose order is both insertion order and report order. Roll numbers are unique.

Provides functions for loading a Roster from its text file, saving it back, and adding, finding, and updating students.
Files are read and written as UTF-8.

On-disk format, one student per line:

    <roll> <name> <total_classes> <attended_classes> <marks>

Names are written as-is, so a name containing whitespace shifts the remaining fields and breaks the line on reload.
"""

from __future__ import annotations

from collections.abc import Iterator

from core.errors import DuplicateKeyError, NotFoundError, ValidationError
from core.logger import get_logger
from core.response import ErrorCode, Response
from models.student import RECORD_FIELD_COUNT, Student

logger = get_logger("roster")


class Roster:

    def __init__(self, data_path: str):
        self._students: list[Student] = []
        self._data_path: str = data_path

    # === properties ===

    @property
    def students(self) -> list[Student]:
        return self._students.copy()

    @property
    def size(self) -> int:
        return len(self._students)

    @property
    def is_empty(self) -> bool:
        return not self._students

    # === public classmethods ===

    @classmethod
    def load(cls, data_path: str) -> Response:
        """
        Reads previously saved student data from disk and returns a fresh `Roster`.

        Args:
            data_path (str): Path to the roster text file.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True. A missing or unreadable file means there is no data yet.
                - detail (str | None):
                    - "No existing data file found. Starting fresh." if there was nothing to read.
                    - "Loaded N student(s) from file." otherwise.
                - data (dict): Payload with the following keys:
                    - "roster" (Roster): The loaded `Roster`.
                    - "loaded" (int): The number of students read.

        Notes:
            - Tokens are consumed in groups of five. Parsing stops silently at the first malformed group,
              so everything after a bad line is dropped.
            - A group whose roll number is already loaded counts as malformed.
        """
        roster = cls(data_path)

        try:
            with open(data_path, "r", encoding="utf-8") as f:
                content = f.read()

        except FileNotFoundError:
            logger.info(f"No data file at {data_path}")

            return Response.succeed(
                detail="No existing data file found. Starting fresh.",
                data={"roster": roster, "loaded": 0},
            )

        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {data_path}: {e}")

            return Response.succeed(
                detail="No existing data file found. Starting fresh.",
                data={"roster": roster, "loaded": 0},
            )

        roster.import_students(content.split())

        logger.info(f"Loaded {roster.size} student(s) from {data_path}")

        return Response.succeed(
            detail=f"Loaded {roster.size} student(s) from file.",
            data={"roster": roster, "loaded": roster.size},
        )

    # === persistence and import ===

    def save(self, data_path: str | None = None) -> Response:
        """
        Writes every student to disk, one line each, overwriting the file.

        Args:
            data_path (str | None):
                - The file to write.
                - If no argument is provided, the path the roster was loaded from is used.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was written.
                    - False if the file could not be opened, or a name could not be encoded.
                - detail (str | None):
                    - On success, a confirmation naming the file.
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.IO_ERROR` if OSError or UnicodeEncodeError raised.
                - data (dict): Payload with the following keys:
                    - "path" (str): The file that was (or would have been) written.

        Notes:
            - The text is built before the file is opened, so an encoding failure leaves the old file intact.
        """
        target_path = data_path if data_path is not None else self._data_path

        content = "".join(
            f"{student.to_record_line()}\n" for student in self._students
        )

        try:
            encoded = content.encode("utf-8")

            with open(target_path, "wb") as f:
                f.write(encoded)

        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to save roster to {target_path}: {e}")

            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.IO_ERROR,
                data={"path": target_path},
            )

        else:
            logger.info(f"Saved {self.size} student(s) to {target_path}")

            return Response.succeed(
                detail=f"Data saved to {target_path} successfully!",
                data={"path": target_path},
            )

    def import_students(self, tokens: list[str]) -> int:
        """
        Replaces the roster contents with students parsed from whitespace-separated tokens.

        Args:
            tokens (list[str]): The persisted file split on whitespace.

        Returns:
            The number of students imported.

        Notes:
            - Clears the roster before importing.
            - Stops at the first group that fails to parse, validate, or add. Nothing is raised.
        """
        self._students.clear()

        for start in range(0, len(tokens), RECORD_FIELD_COUNT):
            record_fields = tokens[start : start + RECORD_FIELD_COUNT]

            try:
                student = Student.from_record_fields(record_fields)
                self.require_unique_roll_number(student.roll_number)

            except ValueError as e:
                logger.debug(f"Stopped reading at token {start}: {e}")
                break

            self._students.append(student)

        return self.size

    # === data accessors ===

    def find_student_by_roll(self, roll_number: int) -> Response:
        """
        Finds a `Student` by roll number.

        Args:
            roll_number (int): The roll number to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, "Student not found!".
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student`.
                        - "index" (int): Its position on the roster.

        Notes:
            - This method is read-only and does not raise.
        """
        try:
            index = self._index_of(roll_number)

        except NotFoundError:
            return Response.fail(
                detail="Student not found!",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        else:
            return Response.succeed(
                data={
                    "record": self._students[index],
                    "index": index,
                },
            )

    def contains_roll(self, roll_number: int) -> bool:
        return any(s.roll_number == roll_number for s in self._students)

    # === data manipulators ===

    def add_student(self, student: Student) -> Response:
        """
        Appends a `Student` to the end of the roster.

        Args:
            student (Student): The `Student` to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was added.
                    - False if another student already has the same roll number.
                - detail (str | None):
                    - On success, "Student added successfully!".
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_KEY` if the roll number is taken.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student`.

        Notes:
            - This method mutates `Roster` state if successful.
        """
        try:
            self.require_unique_roll_number(student.roll_number)

        except DuplicateKeyError as e:
            return Response.fail(
                detail=f"Error: {e}",
                error=ErrorCode.DUPLICATE_KEY,
                status_code=409,
            )

        self._students.append(student)
        logger.info(f"Added student {student.roll_number} ({student.name})")

        return Response.succeed(
            detail="Student added successfully!",
            data={"record": student},
        )

    def record_attendance(self, presence: dict[int, bool]) -> Response:
        """
        Records one class session for every student on the roster.

        Args:
            presence (dict[int, bool]): Maps roll numbers to True (present) or False (absent).

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the session was recorded.
                    - False if the roster is empty.
                - detail (str | None):
                    - A confirmation or a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if there are no students.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "present" (int): Number of students marked present.
                        - "absent" (int): Number of students marked absent.

        Notes:
            - Every student's total goes up by exactly one. Rolls missing from `presence` count as absent.
            - Rolls in `presence` that are not on the roster are ignored.
        """
        if self.is_empty:
            return Response.fail(
                detail="No students found. Please add students first.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        present_count = 0

        for student in self._students:
            present = bool(presence.get(student.roll_number, False))
            student.record_attendance(present)

            if present:
                present_count += 1

        logger.info(
            f"Recorded attendance: {present_count} present, {self.size - present_count} absent"
        )

        return Response.succeed(
            detail="Attendance marked for all students!",
            data={
                "present": present_count,
                "absent": self.size - present_count,
            },
        )

    def update_student_marks(self, student: Student, marks: float) -> Response:
        """
        Overwrites a `Student`'s exam marks and recomputes the grade.

        Args:
            student (Student): The `Student` being updated.
            marks (float): The new mark, between 0 and 100 inclusive.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the marks were stored.
                    - False if the value is out of range.
                - detail (str | None):
                    - On success, a confirmation with the assigned grade.
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if ValidationError raised.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student`.
                        - "grade" (str): The new grade.

        Notes:
            - On failure the student is left unchanged.
        """
        try:
            student.set_marks(marks)

        except ValidationError as e:
            return Response.fail(
                detail=f"Error: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        logger.info(
            f"Set marks for {student.roll_number} to {student.marks} ({student.grade})"
        )

        return Response.succeed(
            detail=f"Marks entered. Grade assigned: {student.grade}",
            data={
                "record": student,
                "grade": student.grade,
            },
        )

    # === data validators ===

    def require_unique_roll_number(self, roll_number: int) -> None:
        """
        Validates that no student on the roster has the given roll number.

        Raises:
            DuplicateKeyError: If the roll number is already taken.
        """
        if self.contains_roll(roll_number):
            raise DuplicateKeyError(
                f"Student with Roll {roll_number} already exists!"
            )

    # === helper methods ===

    def _index_of(self, roll_number: int) -> int:
        for index, student in enumerate(self._students):
            if student.roll_number == roll_number:
                return index

        raise NotFoundError(f"No student with roll {roll_number}.")

    # === dunder methods ===

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __repr__(self) -> str:
        return f"Roster({self._data_path!r}, {self.size} students)"
