"""
Expected output parsing.

The guide shows results the way psql prints them:

     department_id | department_name
    ---------------+-----------------
                 1 | Executive
    ...
    (10 rows)

or as command tags (UPDATE 4, INSERT 0 1, CREATE VIEW). An Expected Output
section without a code block is prose (plan-dependent output) and is not
diffed.
"""

import re
from dataclasses import dataclass, field

CODE_BLOCK = re.compile(r"```[A-Za-z]*[ \t]*\n(.*?)```", re.DOTALL)
RULE_LINE = re.compile(r"^\s*-+(\+-+)*\s*$")
ROW_COUNT = re.compile(r"^\s*\((\d+) rows?\)\s*$")
ELLIPSIS = re.compile(r"^\s*(\.\.\.|…)\s*$")
STATUS_TAG = re.compile(r"^([A-Z]+(?: [A-Z]+)*)((?: \d+)*)$")


class ExpectedOutputError(ValueError):
    """Expected output block that cannot be read as a table or command tags."""


@dataclass(frozen=True)
class StatusTag:
    command: str
    rowcount: int | None = None

    @classmethod
    def parse(cls, line: str) -> "StatusTag":
        match = STATUS_TAG.match(line.strip())
        if not match:
            raise ExpectedOutputError(f"Not a command tag: {line!r}")
        numbers = match.group(2).split()
        return cls(command=match.group(1), rowcount=int(numbers[-1]) if numbers else None)

    def __str__(self) -> str:
        return self.command if self.rowcount is None else f"{self.command} {self.rowcount}"


@dataclass
class ExpectedOutput:
    kind: str  # table | status | any
    columns: list[str] = field(default_factory=list)
    rows: list[list[str | None]] = field(default_factory=list)
    abbreviated: bool = False
    row_count: int | None = None
    statuses: list[StatusTag] = field(default_factory=list)


def _cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split("|")]


def _parse_table(lines: list[str]) -> ExpectedOutput:
    rule_index = next(i for i, line in enumerate(lines) if RULE_LINE.match(line))
    if rule_index != 1:
        raise ExpectedOutputError("Table output needs exactly one header line above the dash rule")

    columns = _cells(lines[0])
    output = ExpectedOutput(kind="table", columns=columns)
    for line in lines[rule_index + 1 :]:
        count = ROW_COUNT.match(line)
        if count:
            output.row_count = int(count.group(1))
            continue
        if ELLIPSIS.match(line):
            output.abbreviated = True
            continue
        cells = _cells(line)
        if len(cells) != len(columns):
            raise ExpectedOutputError(f"Row has {len(cells)} cells, header has {len(columns)}: {line!r}")
        output.rows.append([cell if cell != "" else None for cell in cells])

    if output.row_count is not None and not output.abbreviated and output.row_count != len(output.rows):
        raise ExpectedOutputError(f"Footer says {output.row_count} rows, listing has {len(output.rows)}")
    return output


def parse_expected_output(text: str) -> ExpectedOutput:
    """Parse the Expected Output section of a challenge."""
    block = CODE_BLOCK.search(text)
    if block is None:
        return ExpectedOutput(kind="any")

    lines = [line for line in block.group(1).splitlines() if line.strip()]
    if not lines:
        return ExpectedOutput(kind="any")

    if any(RULE_LINE.match(line) for line in lines):
        return _parse_table(lines)
    return ExpectedOutput(kind="status", statuses=[StatusTag.parse(line) for line in lines])
