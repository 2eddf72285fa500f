# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Attendance Tracker.

This module provides utilities for:
- Displaying the numbered main menu and reading a choice
- Prompting for and parsing user input
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable

from core.errors import ValidationError
from core.response import Response


class MenuSignal(Enum):
    EXIT = "EXIT"
    INVALID = "INVALID"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Exit",
    rule_width: int = 24,
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu once and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the exit option. Defaults to "Exit".
        rule_width (int, optional): Width of the closing rule. Defaults to 24.

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        MenuSignal.INVALID if the input is not a listed option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - User input is matched by menu index, not by label.
        - Unlike a retry loop, an invalid choice is reported back to the caller so the menu is redrawn.
    """
    print(f"\n{title}")

    for i, (label, _) in enumerate(options, 1):
        print(f"{i}. {label}")

    print(f"0. {zero_option}")
    print("=" * rule_width)

    choice = prompt_user_input("Enter your choice: ")

    try:
        index = int(choice)

    except ValueError:
        return MenuSignal.INVALID

    if index == 0:
        return MenuSignal.EXIT

    if 1 <= index <= len(options):
        return options[index - 1][1]

    return MenuSignal.INVALID


# === prompt user input methods ===


# Prompt Helpers
#
# `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# The parsing variants raise `ValidationError` so each operation can report bad input and return to the menu.


def prompt_user_input(prompt: str) -> str:
    return input(prompt).strip()


def prompt_int_input(prompt: str, field_name: str = "Value") -> int:
    response = prompt_user_input(prompt)

    try:
        return int(response)

    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number, got '{response}'.")


def prompt_float_input(prompt: str, field_name: str = "Value") -> float:
    response = prompt_user_input(prompt)

    try:
        return float(response)

    except ValueError:
        raise ValidationError(f"{field_name} must be a number, got '{response}'.")


def prompt_yes_no(prompt: str) -> bool:
    # only "y" or "Y" counts as yes; anything else is no, without re-prompting
    return prompt_user_input(prompt).lower() == "y"


# === often used messages ===


def display_error(message: str) -> None:
    print(message)


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, prefixes the message with the error code. Defaults to False.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    if not debug:
        print(response.detail)
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"[ERROR: {error_label}] {response.detail}")
