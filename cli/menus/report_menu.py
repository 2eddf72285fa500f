# cli/menus/report_menu.py

"""
View Report menu action.

Prints every student in roster order as a fixed-width table, followed by the student count.
"""

import cli.model_formatters as model_formatters
from models.roster import Roster


def view_report(roster: Roster, debug: bool = False) -> None:
    """
    Prints the fixed-width report of every student in roster order.

    Args:
        roster (Roster): The active `Roster`.
        debug (bool, optional): Unused; accepted so every main menu action shares one signature.
    """
    if roster.is_empty:
        print("\nNo student records to display.")
        return

    print(f"\n{model_formatters.format_roster_report(roster)}")
