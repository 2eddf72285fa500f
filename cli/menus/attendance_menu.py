# cli/menus/attendance_menu.py

"""
Mark Attendance workflow for the Attendance Tracker CLI.

Each run is one class session for the whole roster: every student is asked about in roster order,
answers are staged, and the session is committed to the roster in a single call once all answers are in.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from models.roster import Roster


def mark_attendance(roster: Roster, debug: bool = False) -> None:
    """
    Prompts present/absent for every student and records one class session.

    Args:
        roster (Roster): The active `Roster`.
        debug (bool, optional): If True, failures are shown with their error code.

    Notes:
        - Answers beginning with "y" or "Y" mark the student present. Anything else marks them absent.
        - Invalid answers are not re-prompted.
        - If input ends before every student is asked, nothing is recorded.
    """
    if roster.is_empty:
        print("\nNo students found. Please add students first.")
        return

    print(f"\n{formatters.format_section_header('Mark Attendance')}")
    print("Marking attendance for ALL students for today's class.\n")

    presence: dict[int, bool] = {}

    for student in roster:
        present = helpers.prompt_yes_no(
            f"{model_formatters.format_student_oneline(student)} | Present? (y/n): "
        )
        presence[student.roll_number] = present

        print(f"  Marked: {'Present' if present else 'Absent'}")

    roster_response = roster.record_attendance(presence)

    if not roster_response.success:
        helpers.display_response_failure(roster_response, debug)
        return

    print(f"\n{roster_response.detail}")
