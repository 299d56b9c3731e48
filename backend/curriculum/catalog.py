"""
Challenge catalog.

Loads guide/README.md, follows its part links in order and validates the
structure of the whole curriculum before anything is graded.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from curriculum.parser import Challenge, CurriculumError, Part, parse_part

logger = structlog.get_logger()

# | 1 | [SQL Fundamentals](part-1-fundamentals.md) | 15 | SELECT, WHERE, ... |
INDEX_ROW = re.compile(r"^\|\s*(\d+)\s*\|\s*\[([^\]]+)\]\(([^)]+)\)\s*\|\s*(\d+)\s*\|")


@dataclass
class PartEntry:
    number: int
    title: str
    path: Path
    declared_count: int


@dataclass
class Catalog:
    parts: list[Part] = field(default_factory=list)

    def __post_init__(self):
        self._by_key = {c.key: c for part in self.parts for c in part.challenges}

    def __iter__(self) -> Iterator[Challenge]:
        for part in self.parts:
            yield from part.challenges

    def __len__(self) -> int:
        return len(self._by_key)

    def get(self, key: str) -> Challenge:
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"Unknown challenge '{key}'") from None

    def for_part(self, number: int) -> list[Challenge]:
        for part in self.parts:
            if part.number == number:
                return list(part.challenges)
        raise KeyError(f"Unknown part {number}")


def read_index(guide_dir: Path) -> list[PartEntry]:
    index_path = guide_dir / "README.md"
    if not index_path.exists():
        raise CurriculumError(f"Guide index not found: {index_path}")

    entries = []
    for line in index_path.read_text(encoding="utf-8").splitlines():
        match = INDEX_ROW.match(line.strip())
        if match:
            entries.append(
                PartEntry(
                    number=int(match.group(1)),
                    title=match.group(2).strip(),
                    path=guide_dir / match.group(3).strip(),
                    declared_count=int(match.group(4)),
                )
            )
    if not entries:
        raise CurriculumError(f"{index_path}: no part rows found")
    return entries


def _validate_part(entry: PartEntry, part: Part) -> None:
    if part.number != entry.number:
        raise CurriculumError(f"{entry.path.name}: heading says Part {part.number}, index says {entry.number}")
    numbers = [c.number for c in part.challenges]
    if numbers != list(range(1, len(numbers) + 1)):
        raise CurriculumError(f"{entry.path.name}: challenge numbers are not contiguous from 1: {numbers}")
    if len(numbers) != entry.declared_count:
        raise CurriculumError(
            f"{entry.path.name}: index declares {entry.declared_count} challenges, found {len(numbers)}"
        )


def load_catalog(guide_dir: Path) -> Catalog:
    """Parse and validate every part listed in the guide index."""
    guide_dir = Path(guide_dir)
    entries = read_index(guide_dir)

    expected_numbers = list(range(1, len(entries) + 1))
    if [e.number for e in entries] != expected_numbers:
        raise CurriculumError(f"Guide index parts must be numbered 1..{len(entries)} in order")

    parts = []
    for entry in entries:
        if not entry.path.exists():
            raise CurriculumError(f"Part file not found: {entry.path}")
        part = parse_part(entry.path.read_text(encoding="utf-8"), source=entry.path.name)
        _validate_part(entry, part)
        parts.append(part)

    catalog = Catalog(parts=parts)
    logger.info("catalog.loaded", guide_dir=str(guide_dir), parts=len(parts), challenges=len(catalog))
    return catalog
