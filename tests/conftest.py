# tests/conftest.py

import pytest

from core.config import Settings
from models.roster import Roster
from models.student import Student


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "attendance_data.txt")


@pytest.fixture
def sample_student():
    return Student(1, "Alice")


@pytest.fixture
def sample_roster(data_file):
    roster = Roster(data_file)
    roster.add_student(Student(1, "Alice"))
    roster.add_student(Student(2, "Bob"))
    return roster


@pytest.fixture
def sample_settings(data_file):
    return Settings(data_file=data_file)


@pytest.fixture
def console_input(monkeypatch):
    """
    Feeds scripted lines to `input()`. Raises EOFError once the script runs out.
    """

    def feed(lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return feed
