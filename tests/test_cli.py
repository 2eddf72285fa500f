# tests/test_cli.py

import json

import cli.menu_helpers as helpers
from cli.main import LoopState, exit_program, run_cli, save_roster
from cli.menu_helpers import MenuSignal
from cli.menus import attendance_menu, marks_menu, report_menu, students_menu
from core.config import DEFAULT_DATA_FILE, Settings, load_settings
from models.roster import Roster
from models.student import Student


def report_row(roll, name, total, attended, percent, marks, grade):
    return (
        str(roll).ljust(8)
        + name.ljust(20)
        + str(total).ljust(10)
        + str(attended).ljust(10)
        + percent.ljust(12)
        + marks.ljust(8)
        + grade.ljust(6)
    )


# === main loop ===


def test_full_session(sample_settings, data_file, console_input, capsys):
    console_input(
        [
            "1", "1", "Alice",
            "1", "2", "Bob",
            "2", "y", "n",
            "3", "1", "90",
            "4",
            "0",
        ]
    )

    run_cli(sample_settings)

    out = capsys.readouterr().out
    assert out.startswith(
        "=" * 38 + "\n  Smart Attendance & Performance Tracker\n" + "=" * 38 + "\n"
    )
    assert "No existing data file found. Starting fresh." in out
    assert out.count("Student added successfully!") == 2
    assert "Attendance marked for all students!" in out
    assert "Marks entered. Grade assigned: A" in out
    assert report_row(1, "Alice", 1, 1, "100.0", "90.0", "A") in out
    assert report_row(2, "Bob", 1, 0, "0.0", "0.0", "N/A") in out
    assert "Total Students: 2" in out
    assert "Saving data before exit..." in out
    assert out.rstrip().endswith("Goodbye!")

    with open(data_file) as f:
        assert f.read() == "1 Alice 1 1 90\n2 Bob 1 0 0\n"


def test_session_resumes_from_saved_data(sample_settings, data_file, console_input, capsys):
    with open(data_file, "w") as f:
        f.write("1 Alice 4 3 88\n")

    console_input(["4", "0"])
    run_cli(sample_settings)

    out = capsys.readouterr().out
    assert "Loaded 1 student(s) from file." in out
    assert report_row(1, "Alice", 4, 3, "75.0", "88.0", "A") in out


def test_invalid_choices_keep_running(sample_settings, console_input, capsys):
    console_input(["9", "abc", "-1", "0"])

    run_cli(sample_settings)

    out = capsys.readouterr().out
    assert out.count("Invalid choice! Please enter 0-5.") == 3
    assert out.count("====== MAIN MENU ======") == 4


def test_end_of_input_saves_and_exits(sample_settings, data_file, console_input, capsys):
    console_input(["1", "5", "Eve"])

    run_cli(sample_settings)

    out = capsys.readouterr().out
    assert "Goodbye!" in out

    with open(data_file) as f:
        assert f.read() == "5 Eve 0 0 0\n"


def test_wrongly_typed_config_still_starts(tmp_path, monkeypatch, console_input, capsys):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "tracker_config.json"
    config_file.write_text(json.dumps({"log_level": 10, "data_file": None}))

    settings = load_settings(str(config_file))
    assert settings == Settings()

    console_input(["0"])
    run_cli(settings)

    console_input(["0"])
    run_cli(Settings(data_file=str(tmp_path / "other.txt"), log_level=10))

    out = capsys.readouterr().out
    assert out.count("Goodbye!") == 2
    assert (tmp_path / DEFAULT_DATA_FILE).read_text() == ""


def test_explicit_save(sample_settings, data_file, console_input, capsys):
    console_input(["1", "3", "Cy", "5"])

    run_cli(sample_settings)

    out = capsys.readouterr().out
    assert out.count(f"Data saved to {data_file} successfully!") == 2


# === operations ===


def test_add_student_duplicate_roll(sample_roster, console_input, capsys):
    console_input(["1"])

    students_menu.add_student(sample_roster)

    assert "Error: Student with Roll 1 already exists!" in capsys.readouterr().out
    assert sample_roster.size == 2


def test_add_student_empty_name(sample_roster, console_input, capsys):
    console_input(["3", ""])

    students_menu.add_student(sample_roster)

    assert "Error: Name cannot be empty." in capsys.readouterr().out
    assert sample_roster.size == 2


def test_add_student_bad_roll(sample_roster, console_input, capsys):
    console_input(["three"])

    students_menu.add_student(sample_roster)

    assert "Roll Number must be a whole number" in capsys.readouterr().out
    assert sample_roster.size == 2


def test_mark_attendance_accepts_any_case(sample_roster, console_input, capsys):
    console_input(["Y", "y"])

    attendance_menu.mark_attendance(sample_roster)

    alice, bob = sample_roster.students
    assert alice.attended_classes == 1
    assert bob.attended_classes == 1
    assert capsys.readouterr().out.count("Marked: Present") == 2


def test_mark_attendance_treats_other_input_as_absent(sample_roster, console_input):
    console_input(["maybe", ""])

    attendance_menu.mark_attendance(sample_roster)

    for student in sample_roster:
        assert student.total_classes == 1
        assert student.attended_classes == 0


def test_mark_attendance_only_single_y_is_present(sample_roster, console_input, capsys):
    console_input(["yes", "yak"])

    attendance_menu.mark_attendance(sample_roster)

    for student in sample_roster:
        assert student.attended_classes == 0

    assert capsys.readouterr().out.count("Marked: Absent") == 2


def test_operations_on_empty_roster(data_file, capsys):
    roster = Roster(data_file)

    attendance_menu.mark_attendance(roster)
    marks_menu.enter_marks(roster)
    report_menu.view_report(roster)

    out = capsys.readouterr().out
    assert out.count("No students found. Please add students first.") == 2
    assert "No student records to display." in out


def test_enter_marks_unknown_roll(sample_roster, console_input, capsys):
    console_input(["99"])

    marks_menu.enter_marks(sample_roster)

    assert "Student not found!" in capsys.readouterr().out


def test_enter_marks_out_of_range(sample_roster, console_input, capsys):
    console_input(["2", "101"])

    marks_menu.enter_marks(sample_roster)

    assert "Error: Marks must be between 0 and 100." in capsys.readouterr().out
    bob = sample_roster.find_student_by_roll(2).data["record"]
    assert bob.marks == 0
    assert bob.grade == "N/A"


def test_enter_marks_unparseable(sample_roster, console_input, capsys):
    console_input(["2", "ninety"])

    marks_menu.enter_marks(sample_roster)

    assert "Error: Marks must be between 0 and 100." in capsys.readouterr().out


def test_save_failure_is_reported(tmp_path, capsys):
    roster = Roster(str(tmp_path))
    roster.add_student(Student(1, "Alice"))

    assert not save_roster(roster)
    assert exit_program(roster) is LoopState.EXITED

    out = capsys.readouterr().out
    assert out.count("Error: Could not open file for saving!") == 2
    assert "Goodbye!" in out


# === helpers ===


def test_display_menu(console_input, capsys):
    def action():
        return None

    options = [("First", action)]

    console_input(["1", "0", "2", "x"])

    assert helpers.display_menu("TITLE", options) is action
    assert helpers.display_menu("TITLE", options) is MenuSignal.EXIT
    assert helpers.display_menu("TITLE", options) is MenuSignal.INVALID
    assert helpers.display_menu("TITLE", options) is MenuSignal.INVALID

    assert "1. First\n0. Exit" in capsys.readouterr().out
