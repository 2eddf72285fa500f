# cli/menus/students_menu.py

"""
Add Student workflow for the Attendance Tracker CLI.

Prompts for a roll number and a name, then appends a new student with zeroed attendance and no marks.
The roll number is checked for uniqueness before the name is requested.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from core.errors import DuplicateKeyError, ValidationError
from models.roster import Roster
from models.student import Student


def add_student(roster: Roster, debug: bool = False) -> None:
    """
    Creates a new `Student` from user input and adds it to the roster.

    Args:
        roster (Roster): The active `Roster`.
        debug (bool, optional): If True, failures are shown with their error code.

    Notes:
        - A duplicate roll number, an unparseable roll number, or an empty name aborts without changing the roster.
        - Additions are not saved automatically.
    """
    print(f"\n{formatters.format_section_header('Add New Student')}")

    try:
        roll_number = helpers.prompt_int_input("Enter Roll Number: ", "Roll Number")

        roster.require_unique_roll_number(roll_number)

        name = helpers.prompt_user_input("Enter Student Name: ")
        new_student = Student(roll_number, name)

    except (ValidationError, DuplicateKeyError) as e:
        helpers.display_error(f"Error: {e}")
        return

    roster_response = roster.add_student(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response, debug)
        return

    print(roster_response.detail)
