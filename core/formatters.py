# core/formatters.py

# all pure text utilities
# must never import from models!

from typing import Any, NamedTuple

# === generic text formatters ===


def format_banner_text(title: str, width: int = 38, indent: int = 2) -> str:
    line = format_rule("=", width)
    padding = " " * indent

    return f"{line}\n{padding}{title}\n{line}"


def format_section_header(title: str) -> str:
    return f"--- {title} ---"


def format_rule(char: str, width: int) -> str:
    return char * width


# === number formatters ===


def format_number(value: float) -> str:
    """
    Renders a number in its natural textual form.

    Integral values drop the decimal point (90.0 -> "90"), everything else uses
    the shortest text that reads back as the same float (84.5 -> "84.5").
    """
    value = float(value)

    if value.is_integer():
        return str(int(value))

    return repr(value)


# === report layout ===


class Column(NamedTuple):
    label: str
    width: int
    precision: int | None = None


REPORT_COLUMNS: tuple[Column, ...] = (
    Column("Roll", 8),
    Column("Name", 20),
    Column("Total", 10),
    Column("Present", 10),
    Column("Attend%", 12, 1),
    Column("Marks", 8, 1),
    Column("Grade", 6),
)

REPORT_WIDTH = 74


def format_cell(value: Any, column: Column) -> str:
    # left aligned, padded but never truncated
    if column.precision is not None:
        return f"{float(value):<{column.width}.{column.precision}f}"

    return f"{str(value):<{column.width}}"


def format_row(values: list[Any], columns: tuple[Column, ...] = REPORT_COLUMNS) -> str:
    if len(values) != len(columns):
        raise ValueError(
            f"Expected {len(columns)} values for the report row, got {len(values)}."
        )

    return "".join(format_cell(value, column) for value, column in zip(values, columns))


def format_header(columns: tuple[Column, ...] = REPORT_COLUMNS) -> str:
    return "".join(f"{column.label:<{column.width}}" for column in columns)
