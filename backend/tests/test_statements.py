"""
Tests for SQL script splitting and statement classification.
"""

import pytest

from grading.statements import StatementSplitError, mask_sql, split_statements, strip_parenthesized


class TestSplitStatements:
    def test_splits_on_top_level_semicolons(self):
        statements = split_statements("SELECT 1; SELECT 2;\n\n;")
        assert [s.text for s in statements] == ["SELECT 1", "SELECT 2"]

    def test_semicolons_in_literals_and_comments(self):
        sql = """
        -- first; still a comment
        SELECT 'a;b', "odd;name" FROM t; /* block; comment */
        SELECT 'it''s; fine';
        """
        statements = split_statements(sql)
        assert len(statements) == 2
        assert statements[0].text.endswith('FROM t')
        assert statements[1].text.endswith("SELECT 'it''s; fine'")
        assert statements[1].command == "SELECT"

    def test_dollar_quoted_function_body(self):
        sql = """
        CREATE OR REPLACE FUNCTION f() RETURNS trigger AS $$
        BEGIN
            INSERT INTO log VALUES (1);
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
        SELECT f();
        """
        statements = split_statements(sql)
        assert [s.command for s in statements] == ["CREATE", "SELECT"]

    def test_tagged_dollar_quotes(self):
        statements = split_statements("SELECT $body$ a; b $body$; SELECT 2")
        assert len(statements) == 2

    def test_positional_parameter_is_not_a_dollar_quote(self):
        statements = split_statements("SELECT a$1 FROM t; SELECT 2")
        assert len(statements) == 2

    def test_escape_string_backslash_quote(self):
        statements = split_statements(r"SELECT E'it\'s; fine' AS t; SELECT e'a\\'")
        assert [s.text for s in statements] == [r"SELECT E'it\'s; fine' AS t", r"SELECT e'a\\'"]
        assert "fine" not in statements[0].masked

    def test_backslash_is_literal_in_plain_strings(self):
        statements = split_statements(r"SELECT 'C:\'; SELECT name'x' FROM t")
        assert len(statements) == 2
        assert statements[0].text == r"SELECT 'C:\'"

    def test_comment_only_script(self):
        assert split_statements("-- nothing here\n/* or here */") == []

    @pytest.mark.parametrize(
        "sql",
        ["SELECT 'open", 'SELECT "open', "SELECT 1 /* open", "SELECT $$ open"],
    )
    def test_unterminated(self, sql):
        with pytest.raises(StatementSplitError):
            split_statements(sql)


class TestClassification:
    @pytest.mark.parametrize(
        "sql, read_only",
        [
            ("SELECT * FROM employees", True),
            ("  -- leading comment\nselect 1", True),
            ("WITH x AS (SELECT 1) SELECT * FROM x", True),
            ("WITH gone AS (DELETE FROM t RETURNING *) SELECT * FROM gone", False),
            ("WITH x AS (SELECT 'DELETE') SELECT * FROM x", True),
            ("EXPLAIN SELECT 1", True),
            ("EXPLAIN ANALYZE SELECT 1", False),
            ("EXPLAIN (ANALYZE, BUFFERS) SELECT 1", False),
            ("UPDATE accounts SET balance = 0", False),
            ("CREATE VIEW v AS SELECT 1", False),
            ("BEGIN", False),
        ],
    )
    def test_read_only(self, sql, read_only):
        (statement,) = split_statements(sql)
        assert statement.read_only is read_only

    def test_transaction_control(self):
        commands = [s.is_transaction_control for s in split_statements("BEGIN; SAVEPOINT a; UPDATE t SET x = 1; COMMIT")]
        assert commands == [True, True, False, True]

    def test_top_level_order_by(self):
        (ordered,) = split_statements("SELECT * FROM (SELECT * FROM t ORDER BY a) s ORDER BY b")
        (inner_only,) = split_statements("SELECT ROW_NUMBER() OVER (ORDER BY a) FROM t")
        (in_string,) = split_statements("SELECT 'ORDER BY' FROM t")
        assert ordered.has_top_level_order_by
        assert not inner_only.has_top_level_order_by
        assert not in_string.has_top_level_order_by


def test_mask_keeps_offsets():
    sql = "SELECT 'abc' -- note\nFROM t"
    masked = mask_sql(sql)
    assert len(masked) == len(sql)
    assert "abc" not in masked
    assert "note" not in masked
    assert masked.endswith("FROM t")


def test_strip_parenthesized():
    assert strip_parenthesized("a (b (c) d) e").split() == ["a", "e"]
