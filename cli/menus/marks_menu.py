# cli/menus/marks_menu.py

"""
Enter Marks workflow for the Attendance Tracker CLI.

Looks up one student by roll number and overwrites their exam marks. The grade is recomputed by the model.
"""

from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from core.errors import ValidationError
from models.roster import Roster
from models.student import Student

MARKS_RANGE_MESSAGE = "Error: Marks must be between 0 and 100."


def enter_marks(roster: Roster, debug: bool = False) -> None:
    """
    Prompts for a roll number and a mark, then updates that student's marks and grade.

    Args:
        roster (Roster): The active `Roster`.
        debug (bool, optional): If True, failures are shown with their error code.

    Notes:
        - An unknown roll number, unparseable input, or a mark outside [0, 100] aborts without changes.
    """
    if roster.is_empty:
        print("\nNo students found. Please add students first.")
        return

    print(f"\n{formatters.format_section_header('Enter Marks')}")

    try:
        roll_number = helpers.prompt_int_input("Enter Roll Number: ", "Roll Number")

    except ValidationError as e:
        helpers.display_error(f"Error: {e}")
        return

    roster_response = roster.find_student_by_roll(roll_number)

    if not roster_response.success:
        helpers.display_response_failure(roster_response, debug)
        return

    student = cast(Student, roster_response.data["record"])

    try:
        marks = helpers.prompt_float_input(
            f"Enter Marks for {student.name} (0 to 100): ", "Marks"
        )

    except ValidationError:
        helpers.display_error(MARKS_RANGE_MESSAGE)
        return

    roster_response = roster.update_student_marks(student, marks)

    if not roster_response.success:
        if debug:
            helpers.display_response_failure(roster_response, debug)
        else:
            helpers.display_error(MARKS_RANGE_MESSAGE)
        return

    print(roster_response.detail)
