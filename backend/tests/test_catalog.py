"""
Tests for loading and validating the guide.
"""

import pytest

from curriculum.catalog import load_catalog, read_index
from curriculum.parser import CurriculumError
from grading.expected import parse_expected_output

PART_COUNTS = {1: 15, 2: 14, 3: 12, 4: 14, 5: 12, 6: 12}


class TestRealGuide:
    def test_has_79_challenges_in_six_parts(self, catalog):
        assert len(catalog) == 79
        assert [p.number for p in catalog.parts] == [1, 2, 3, 4, 5, 6]
        assert {p.number: len(p.challenges) for p in catalog.parts} == PART_COUNTS

    def test_index_matches_parts(self, guide_dir):
        entries = read_index(guide_dir)
        assert [e.declared_count for e in entries] == list(PART_COUNTS.values())
        assert all(e.path.exists() for e in entries)

    def test_get_by_key(self, catalog):
        challenge = catalog.get("1.9")
        assert challenge.title == "Count the Employees"
        assert challenge.solution == "SELECT COUNT(*) AS total_employees FROM employees;"
        expected = parse_expected_output(challenge.expected)
        assert expected.columns == ["total_employees"]
        assert expected.rows == [["37"]]

    def test_unknown_key(self, catalog):
        with pytest.raises(KeyError):
            catalog.get("7.1")

    def test_for_part(self, catalog):
        keys = [c.key for c in catalog.for_part(3)]
        assert keys[0] == "3.1"
        assert keys[-1] == "3.12"
        with pytest.raises(KeyError):
            catalog.for_part(42)

    def test_every_expected_output_parses(self, catalog):
        kinds = {c.key: parse_expected_output(c.expected).kind for c in catalog}
        assert kinds["6.5"] == "any"
        assert set(kinds.values()) <= {"table", "status", "any"}


def _write_guide(tmp_path, declared: int, challenges: int):
    body = "\n".join(
        f"## Challenge {n}: C{n}\n### Problem\nP\n### Solution\n```sql\nSELECT {n};\n```\n"
        for n in range(1, challenges + 1)
    )
    (tmp_path / "part-1.md").write_text(f"# Part 1: Basics\n\n{body}", encoding="utf-8")
    (tmp_path / "README.md").write_text(
        "| Part | Title | Challenges | Topics |\n"
        "|------|-------|------------|--------|\n"
        f"| 1 | [Basics](part-1.md) | {declared} | SELECT |\n",
        encoding="utf-8",
    )


class TestValidation:
    def test_loads_small_guide(self, tmp_path):
        _write_guide(tmp_path, declared=2, challenges=2)
        catalog = load_catalog(tmp_path)
        assert [c.key for c in catalog] == ["1.1", "1.2"]

    def test_declared_count_mismatch(self, tmp_path):
        _write_guide(tmp_path, declared=3, challenges=2)
        with pytest.raises(CurriculumError, match="declares 3"):
            load_catalog(tmp_path)

    def test_missing_index(self, tmp_path):
        with pytest.raises(CurriculumError, match="index not found"):
            load_catalog(tmp_path)

    def test_missing_part_file(self, tmp_path):
        _write_guide(tmp_path, declared=1, challenges=1)
        (tmp_path / "part-1.md").unlink()
        with pytest.raises(CurriculumError, match="Part file not found"):
            load_catalog(tmp_path)

    def test_non_contiguous_numbers(self, tmp_path):
        _write_guide(tmp_path, declared=2, challenges=2)
        path = tmp_path / "part-1.md"
        path.write_text(path.read_text(encoding="utf-8").replace("Challenge 2:", "Challenge 3:"), encoding="utf-8")
        with pytest.raises(CurriculumError, match="not contiguous"):
            load_catalog(tmp_path)
