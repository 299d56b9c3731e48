"""
Guide markdown parser.

A part file looks like:

    # Part 1: SQL Fundamentals
    <intro>
    ## Challenge 1: Title
    **Topics:** SELECT, ORDER BY
    ### Problem
    ### Expected Output
    ### Solution
    ### Notes

Headings inside fenced code blocks are ignored.
"""

import re
from dataclasses import dataclass, field

PART_HEADING = re.compile(r"^#\s+Part\s+(\d+)\s*:\s*(.+?)\s*$")
CHALLENGE_HEADING = re.compile(r"^##\s+Challenge\s+(\d+)\s*:\s*(.+?)\s*$")
SECTION_HEADING = re.compile(r"^###\s+(.+?)\s*$")
TOPICS_LINE = re.compile(r"^\*\*Topics:\*\*\s*(.+?)\s*$")
FENCE = re.compile(r"^(```|~~~)")
SQL_BLOCK = re.compile(r"```sql[ \t]*\n(.*?)```", re.DOTALL)
RULE = re.compile(r"^(-{3,}|\*{3,})\s*$")

SECTIONS = {"problem", "expected output", "solution", "notes"}


class CurriculumError(ValueError):
    """Malformed guide content."""


@dataclass
class Challenge:
    part: int
    number: int
    title: str
    topics: list[str] = field(default_factory=list)
    problem: str = ""
    expected: str = ""
    solution: str = ""
    notes: str = ""

    @property
    def key(self) -> str:
        return f"{self.part}.{self.number}"


@dataclass
class Part:
    number: int
    title: str
    intro: str = ""
    challenges: list[Challenge] = field(default_factory=list)
    source: str = ""


def _clean(lines: list[str]) -> str:
    while lines and (not lines[-1].strip() or RULE.match(lines[-1])):
        lines.pop()
    return "\n".join(lines).strip("\n")


def extract_sql(solution_section: str) -> str:
    """The first ```sql block of a Solution section."""
    match = SQL_BLOCK.search(solution_section)
    return match.group(1).strip() if match else ""


def _finish(challenge: Challenge, sections: dict[str, list[str]], source: str) -> Challenge:
    challenge.problem = _clean(sections.get("problem", []))
    challenge.expected = _clean(sections.get("expected output", []))
    challenge.notes = _clean(sections.get("notes", []))
    challenge.solution = extract_sql(_clean(sections.get("solution", [])))
    if not challenge.problem:
        raise CurriculumError(f"{source}: challenge {challenge.key} has no Problem section")
    if not challenge.solution:
        raise CurriculumError(f"{source}: challenge {challenge.key} has no ```sql solution")
    return challenge


def parse_part(text: str, source: str = "<string>") -> Part:
    """Parse one part file into a Part with its challenges."""
    part: Part | None = None
    intro: list[str] = []
    current: Challenge | None = None
    sections: dict[str, list[str]] = {}
    section: str | None = None
    in_fence = False

    for line in text.splitlines():
        if FENCE.match(line.strip()):
            in_fence = not in_fence
        elif not in_fence:
            if part is None:
                match = PART_HEADING.match(line)
                if match:
                    part = Part(number=int(match.group(1)), title=match.group(2), source=source)
                continue

            match = CHALLENGE_HEADING.match(line)
            if match:
                if current is not None:
                    part.challenges.append(_finish(current, sections, source))
                current = Challenge(part=part.number, number=int(match.group(1)), title=match.group(2))
                sections, section = {}, None
                continue

            if current is not None:
                match = SECTION_HEADING.match(line)
                if match:
                    section = match.group(1).lower()
                    if section not in SECTIONS:
                        raise CurriculumError(f"{source}: unknown section '{match.group(1)}' in {current.key}")
                    sections[section] = []
                    continue
                if section is None:
                    topics = TOPICS_LINE.match(line)
                    if topics:
                        current.topics = [t.strip() for t in topics.group(1).split(",") if t.strip()]
                    continue

        if current is None:
            if part is not None:
                intro.append(line)
        elif section is not None:
            sections[section].append(line)

    if part is None:
        raise CurriculumError(f"{source}: missing '# Part N: Title' heading")
    if in_fence:
        raise CurriculumError(f"{source}: unterminated code fence")
    if current is not None:
        part.challenges.append(_finish(current, sections, source))

    part.intro = _clean(intro)
    return part
