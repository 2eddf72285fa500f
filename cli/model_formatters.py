# cli/model_formatters.py

# anything that renders domain objects or performs Roster read-only operations
import core.formatters as formatters
from models.roster import Roster
from models.student import Student

REPORT_TITLE = "========== STUDENT REPORT =========="

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"Roll {student.roll_number} - {student.name}"


def format_student_report_row(student: Student) -> str:
    return formatters.format_row(
        [
            student.roll_number,
            student.name,
            student.total_classes,
            student.attended_classes,
            student.attendance_percent,
            student.marks,
            student.grade,
        ]
    )


# === roster formatters ===


def format_roster_report(roster: Roster) -> str:
    lines = [
        REPORT_TITLE,
        formatters.format_header(),
        formatters.format_rule("-", formatters.REPORT_WIDTH),
    ]
    lines.extend(format_student_report_row(student) for student in roster)
    lines.append(formatters.format_rule("=", formatters.REPORT_WIDTH))
    lines.append(f"Total Students: {roster.size}")

    return "\n".join(lines)
