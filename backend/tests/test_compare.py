"""
Tests for comparing query results with expected output.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from grading.compare import cells_match, compare_statuses, compare_table, format_cell, numbers_match
from grading.expected import ExpectedOutput, StatusTag


class TestCells:
    @pytest.mark.parametrize(
        "expected, actual",
        [
            ("95000.00", Decimal("95000.00")),
            ("95000.00", 95000),
            ("101666.67", Decimal("101666.666666666667")),
            ("0.33", 0.3333333),
            ("37", 37),
            ("2024-01-15", date(2024, 1, 15)),
            ("t", True),
            ("f", False),
            ("Executive", "Executive"),
            ("12.50", "12.5"),
        ],
    )
    def test_matches(self, expected, actual):
        assert cells_match(expected, actual)

    @pytest.mark.parametrize(
        "expected, actual",
        [
            ("95000.00", Decimal("95000.01")),
            ("37", 38),
            ("t", False),
            ("Sales", "Executive"),
            ("Sales", None),
            (None, "Sales"),
        ],
    )
    def test_mismatches(self, expected, actual):
        assert not cells_match(expected, actual)

    def test_null_matches_empty_cell(self):
        assert cells_match(None, None)

    def test_numbers_round_half_up(self):
        assert numbers_match("2.50", Decimal("2.495"))
        assert not numbers_match("abc", 1)

    def test_format_cell(self):
        assert format_cell(None) == ""
        assert format_cell(True) == "t"
        assert format_cell(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
        assert format_cell({"a": 1}) == '{"a": 1}'


def _table(rows, columns=("id", "name"), **kwargs):
    return ExpectedOutput(kind="table", columns=list(columns), rows=[list(r) for r in rows], **kwargs)


class TestCompareTable:
    def test_ordered_match(self):
        expected = _table([("1", "a"), ("2", "b")])
        assert compare_table(expected, ["id", "name"], [[1, "a"], [2, "b"]], ordered=True) == []

    def test_ordered_mismatch_reports_row(self):
        expected = _table([("1", "a"), ("2", "b")])
        problems = compare_table(expected, ["id", "name"], [[2, "b"], [1, "a"]], ordered=True)
        assert problems[0].startswith("row 1")

    def test_unordered_ignores_order(self):
        expected = _table([("1", "a"), ("2", "b")])
        assert compare_table(expected, ["id", "name"], [[2, "b"], [1, "a"]], ordered=False) == []

    def test_unordered_reports_missing_and_extra(self):
        expected = _table([("1", "a"), ("2", "b")])
        problems = compare_table(expected, ["id", "name"], [[1, "a"], [3, "c"]], ordered=False)
        assert problems == ["missing row '2 | b'", "unexpected row '3 | c'"]

    def test_column_names_case_insensitive(self):
        expected = _table([("1", "a")])
        assert compare_table(expected, ["ID", "Name"], [[1, "a"]], ordered=False) == []

    def test_column_mismatch(self):
        expected = _table([("1", "a")])
        problems = compare_table(expected, ["id"], [[1]], ordered=False)
        assert problems[0].startswith("columns differ")

    def test_row_count(self):
        expected = _table([("1", "a")], row_count=1)
        problems = compare_table(expected, ["id", "name"], [[1, "a"], [2, "b"]], ordered=False)
        assert problems == ["row count differs: expected 1, got 2"]

    def test_abbreviated_ordered_is_a_prefix(self):
        expected = _table([("1", "a")], abbreviated=True, row_count=3)
        rows = [[1, "a"], [2, "b"], [3, "c"]]
        assert compare_table(expected, ["id", "name"], rows, ordered=True) == []
        problems = compare_table(expected, ["id", "name"], rows[1:] + rows[:1], ordered=True)
        assert problems == ["row 1: expected '1 | a', got '2 | b'"]

    def test_abbreviated_unordered_is_a_subset(self):
        expected = _table([("1", "a"), ("2", "b")], abbreviated=True, row_count=4)
        rows = [[3, "c"], [2, "b"], [4, "d"], [1, "a"]]
        assert compare_table(expected, ["id", "name"], rows, ordered=False) == []

    def test_abbreviated_unordered_reports_missing_rows(self):
        expected = _table([("1", "a"), ("1", "a")], abbreviated=True, row_count=3)
        rows = [[3, "c"], [1, "a"], [2, "b"]]
        problems = compare_table(expected, ["id", "name"], rows, ordered=False)
        assert problems == ["missing row '1 | a'"]

    def test_abbreviated_without_footer_needs_enough_rows(self):
        expected = _table([("1", "a"), ("2", "b")], abbreviated=True)
        problems = compare_table(expected, ["id", "name"], [[1, "a"]], ordered=False)
        assert problems == ["row count differs: expected at least 2, got 1"]


class TestCompareStatuses:
    def test_matches_tail(self):
        actual = [StatusTag("BEGIN"), StatusTag("UPDATE", 2), StatusTag("COMMIT")]
        assert compare_statuses([StatusTag("UPDATE", 2), StatusTag("COMMIT")], actual) == []

    def test_rowcount_mismatch(self):
        problems = compare_statuses([StatusTag("DELETE", 3)], [StatusTag("DELETE", 1)])
        assert problems == ["expected DELETE 3, got DELETE 1"]

    def test_compares_first_word_of_command(self):
        assert compare_statuses([StatusTag("CREATE VIEW")], [StatusTag("CREATE")]) == []

    def test_too_few_results(self):
        assert compare_statuses([StatusTag("BEGIN"), StatusTag("COMMIT")], [StatusTag("COMMIT")])
