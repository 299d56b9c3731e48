"""
SQL script splitting.

Guide solutions are small scripts: several statements, comments, quoted
strings and the occasional plpgsql body in dollar quotes. Semicolons only
end a statement at top level.
"""

import re
from dataclasses import dataclass

DOLLAR_TAG = re.compile(r"\$(?:[A-Za-z_][A-Za-z0-9_]*)?\$")
WORD = re.compile(r"[A-Za-z_]+")
ORDER_BY = re.compile(r"\bORDER\s+BY\b", re.IGNORECASE)
WRITE_VERBS = re.compile(r"\b(INSERT|UPDATE|DELETE|MERGE|TRUNCATE)\b", re.IGNORECASE)
EXPLAIN_ANALYZE = re.compile(r"^\s*EXPLAIN\s*(\([^)]*\bANALYZE\b|ANALYZE\b)", re.IGNORECASE)

READ_ONLY_COMMANDS = {"SELECT", "VALUES", "TABLE", "SHOW"}
TRANSACTION_COMMANDS = {"BEGIN", "START", "COMMIT", "END", "ROLLBACK", "SAVEPOINT", "RELEASE", "ABORT"}


class StatementSplitError(ValueError):
    """Unterminated string, identifier, comment or dollar-quoted body."""


@dataclass(frozen=True)
class Statement:
    text: str
    masked: str
    command: str

    @property
    def is_transaction_control(self) -> bool:
        return self.command in TRANSACTION_COMMANDS

    @property
    def read_only(self) -> bool:
        if self.command in READ_ONLY_COMMANDS:
            return True
        if self.command == "WITH":
            return not WRITE_VERBS.search(self.masked)
        if self.command == "EXPLAIN":
            return not EXPLAIN_ANALYZE.match(self.masked)
        return False

    @property
    def has_top_level_order_by(self) -> bool:
        return bool(ORDER_BY.search(strip_parenthesized(self.masked)))


def _is_escape_string_prefix(sql: str, quote_at: int) -> bool:
    """True for the quote of E'...', where backslash escapes apply."""
    if quote_at == 0 or sql[quote_at - 1] not in "Ee":
        return False
    before = sql[quote_at - 2] if quote_at >= 2 else ""
    return not (before.isalnum() or before == "_")


def _find_unescaped_quote(sql: str, start: int) -> int:
    j = start
    while j < len(sql):
        if sql[j] == "\\":
            j += 2
        elif sql[j] == "'":
            return j
        else:
            j += 1
    return -1


def mask_sql(sql: str) -> str:
    """Blank out comments, literals and quoted bodies, keeping offsets intact."""
    out = list(sql)
    i, n = 0, len(sql)

    def blank(start: int, end: int) -> None:
        for k in range(start, end):
            if out[k] != "\n":
                out[k] = " "

    while i < n:
        ch = sql[i]
        if sql.startswith("--", i):
            end = sql.find("\n", i)
            end = n if end == -1 else end
            blank(i, end)
            i = end
        elif sql.startswith("/*", i):
            depth, j = 1, i + 2
            while j < n and depth:
                if sql.startswith("/*", j):
                    depth, j = depth + 1, j + 2
                elif sql.startswith("*/", j):
                    depth, j = depth - 1, j + 2
                else:
                    j += 1
            if depth:
                raise StatementSplitError("Unterminated /* comment")
            blank(i, j)
            i = j
        elif ch in ("'", '"'):
            backslash_escapes = ch == "'" and _is_escape_string_prefix(sql, i)
            j = i + 1
            while True:
                if backslash_escapes:
                    j = _find_unescaped_quote(sql, j)
                else:
                    j = sql.find(ch, j)
                if j == -1:
                    kind = "string literal" if ch == "'" else "quoted identifier"
                    raise StatementSplitError(f"Unterminated {kind} starting at offset {i}")
                if j + 1 < n and sql[j + 1] == ch:
                    j += 2
                    continue
                break
            # keep the quotes so adjacent words stay separate
            blank(i + 1, j)
            i = j + 1
        elif ch == "$" and (i == 0 or not (sql[i - 1].isalnum() or sql[i - 1] == "_")):
            match = DOLLAR_TAG.match(sql, i)
            if not match:
                i += 1
                continue
            tag = match.group(0)
            end = sql.find(tag, match.end())
            if end == -1:
                raise StatementSplitError(f"Unterminated dollar-quoted body {tag}")
            blank(match.end(), end)
            i = end + len(tag)
        else:
            i += 1
    return "".join(out)


def strip_parenthesized(masked: str) -> str:
    """Drop everything nested inside parentheses."""
    depth = 0
    out = []
    for ch in masked:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(ch)
    return "".join(out)


def _command(masked: str) -> str:
    match = WORD.search(masked)
    return match.group(0).upper() if match else ""


def split_statements(sql: str) -> list[Statement]:
    """Split a script on top-level semicolons; empty statements are dropped."""
    masked = mask_sql(sql)
    statements = []
    start = 0
    for end in [i for i, ch in enumerate(masked) if ch == ";"] + [len(sql)]:
        text = sql[start:end].strip()
        masked_text = masked[start:end].strip()
        start = end + 1
        if not masked_text:
            continue
        statements.append(Statement(text=text, masked=masked_text, command=_command(masked_text)))
    return statements
