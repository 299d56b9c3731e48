"""
Result comparison.

Actual results come straight from the driver (asyncpg or sqlite3), so cells
are Python objects; expected cells are the text psql printed. Matching is
value based: numbers compare at the expected cell's scale, NULL matches an
empty cell, booleans accept t/f and dates compare in ISO form.
"""

import json
from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from grading.expected import ExpectedOutput, StatusTag

TRUE_TEXT = {"t", "true"}
FALSE_TEXT = {"f", "false"}
ROWCOUNT_COMMANDS = {"INSERT", "UPDATE", "DELETE", "SELECT", "MERGE", "COPY", "FETCH", "MOVE"}


def _as_decimal(value) -> Decimal | None:
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def numbers_match(expected: str, actual) -> bool:
    expected_number = _as_decimal(expected)
    actual_number = _as_decimal(actual)
    if expected_number is None or actual_number is None or not expected_number.is_finite():
        return False
    scale = Decimal(1).scaleb(expected_number.as_tuple().exponent)
    return actual_number.quantize(scale, rounding=ROUND_HALF_UP) == expected_number


def format_cell(value) -> str:
    """Render a driver value the way psql would print it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def cells_match(expected: str | None, actual) -> bool:
    if expected is None:
        return actual is None or actual == ""
    if actual is None:
        return False
    if isinstance(actual, bool):
        text = expected.lower()
        return (actual and text in TRUE_TEXT) or (not actual and text in FALSE_TEXT)
    if isinstance(actual, (int, float, Decimal)):
        return numbers_match(expected, actual)
    rendered = format_cell(actual).strip()
    if rendered == expected:
        return True
    if isinstance(actual, (dict, list)):
        try:
            return json.loads(expected) == actual
        except ValueError:
            return False
    # sqlite hands back untyped text for computed numeric columns
    return isinstance(actual, str) and numbers_match(expected, actual)


def rows_match(expected_row: Sequence, actual_row: Sequence) -> bool:
    return len(expected_row) == len(actual_row) and all(
        cells_match(e, a) for e, a in zip(expected_row, actual_row)
    )


def _describe(row: Sequence) -> str:
    return " | ".join(format_cell(cell) for cell in row)


def compare_table(
    expected: ExpectedOutput,
    columns: Sequence[str],
    rows: Sequence[Sequence],
    ordered: bool,
) -> list[str]:
    """Return the list of differences; empty when the result matches."""
    problems: list[str] = []

    expected_columns = [c.lower() for c in expected.columns]
    actual_columns = [c.lower() for c in columns]
    if expected_columns != actual_columns:
        problems.append(f"columns differ: expected {expected.columns}, got {list(columns)}")
        return problems

    if expected.row_count is not None and expected.row_count != len(rows):
        problems.append(f"row count differs: expected {expected.row_count}, got {len(rows)}")
    elif not expected.abbreviated and len(expected.rows) != len(rows):
        problems.append(f"row count differs: expected {len(expected.rows)}, got {len(rows)}")
    elif len(rows) < len(expected.rows):
        problems.append(f"row count differs: expected at least {len(expected.rows)}, got {len(rows)}")
    if problems:
        return problems

    if ordered:
        for i, (expected_row, actual_row) in enumerate(zip(expected.rows, rows), start=1):
            if not rows_match(expected_row, actual_row):
                problems.append(
                    f"row {i}: expected {_describe(expected_row)!r}, got {_describe(actual_row)!r}"
                )
        return problems

    # unordered: each listed row claims a distinct actual row
    unmatched = list(rows)
    for expected_row in expected.rows:
        for i, actual_row in enumerate(unmatched):
            if rows_match(expected_row, actual_row):
                del unmatched[i]
                break
        else:
            problems.append(f"missing row {_describe(expected_row)!r}")
    if not expected.abbreviated:
        problems += [f"unexpected row {_describe(row)!r}" for row in unmatched]
    return problems


def compare_statuses(expected: Sequence[StatusTag], actual: Sequence[StatusTag]) -> list[str]:
    """Match expected command tags against the last statements executed."""
    if len(actual) < len(expected):
        return [f"expected {len(expected)} command results, got {len(actual)}"]

    problems = []
    for want, got in zip(expected, actual[len(actual) - len(expected) :]):
        if want.command.split()[0] != got.command.split()[0]:
            problems.append(f"expected {want}, got {got}")
        elif (
            want.rowcount is not None
            and want.command.split()[0] in ROWCOUNT_COMMANDS
            and want.rowcount != got.rowcount
        ):
            problems.append(f"expected {want}, got {got}")
    return problems
