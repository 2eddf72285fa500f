# cli/main.py

"""
Main Menu for the Attendance Tracker CLI.

Loads the roster once at startup, then loops over the main menu until the user exits.
Exiting always saves first, and so does running out of input or pressing Ctrl-C.
"""

from enum import Enum

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import attendance_menu, marks_menu, report_menu, students_menu
from core.config import Settings, load_settings
from core.logger import LogLevel, configure_logging, get_logger
from models.roster import Roster

logger = get_logger("cli")

PROGRAM_TITLE = "Smart Attendance & Performance Tracker"
MENU_TITLE = "====== MAIN MENU ======"


class LoopState(Enum):
    RUNNING = "RUNNING"
    EXITED = "EXITED"


def run_cli(settings: Settings | None = None) -> None:
    """
    Top-level loop with dispatch for the Main Menu.

    Args:
        settings (Settings | None): Runtime settings. If None, they are read from the default config file.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - Menu actions all take `(roster, debug)`.
        - An invalid choice prints a message and redraws the menu.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_file, LogLevel.from_name(settings.log_level))

    print(formatters.format_banner_text(PROGRAM_TITLE))

    roster = load_roster(settings.data_file)

    options = [
        ("Add Student", students_menu.add_student),
        ("Mark Attendance", attendance_menu.mark_attendance),
        ("Enter Marks", marks_menu.enter_marks),
        ("View Report", report_menu.view_report),
        ("Save Data", save_roster),
    ]
    zero_option = "Exit"

    state = LoopState.RUNNING

    while state is LoopState.RUNNING:
        try:
            menu_response = helpers.display_menu(MENU_TITLE, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                state = exit_program(roster, settings.debug)

            elif menu_response is MenuSignal.INVALID:
                print(f"Invalid choice! Please enter 0-{len(options)}.")

            elif callable(menu_response):
                menu_response(roster, settings.debug)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, exiting")
            print()
            state = exit_program(roster, settings.debug)


def load_roster(data_file: str) -> Roster:
    """
    Loads the roster from disk, printing how many students were found.

    Args:
        data_file (str): The roster text file.

    Returns:
        The loaded `Roster`, empty if there was no data yet.
    """
    roster_response = Roster.load(data_file)

    print(roster_response.detail)

    return roster_response.data["roster"]


def save_roster(roster: Roster, debug: bool = False) -> bool:
    """
    Writes the roster to its data file and reports the outcome.

    Args:
        roster (Roster): The active `Roster`.
        debug (bool, optional): If True, the underlying error is also shown.

    Returns:
        True if the data was saved, and False otherwise.
    """
    roster_response = roster.save()

    if not roster_response.success:
        print("Error: Could not open file for saving!")
        helpers.display_response_failure(roster_response, debug)
        return False

    print(roster_response.detail)
    return True


def exit_program(roster: Roster, debug: bool = False) -> LoopState:
    """
    Saves the roster and says goodbye.

    Returns:
        LoopState.EXITED, always. A failed save is reported but does not keep the program running.
    """
    print("\nSaving data before exit...")
    save_roster(roster, debug)
    print("Goodbye!")

    return LoopState.EXITED


if __name__ == "__main__":
    run_cli()
