"""
Tests for the guide markdown parser.
"""

import pytest

from curriculum.parser import CurriculumError, extract_sql, parse_part

PART_TEXT = """# Part 9: Practice

Warm-up queries.

---

## Challenge 1: First One

**Topics:** SELECT, WHERE

### Problem

List something.

### Expected Output

```text
 n
---
 1
(1 row)
```

### Solution

```sql
-- ## Challenge 99: not a heading inside a fence
SELECT 1 AS n;
```

### Notes

Nothing special.

---

## Challenge 2: Second One

### Problem

Count something.

### Solution

Try this:

```sql
SELECT COUNT(*) FROM employees;
```

```sql
SELECT 'ignored';
```
"""


class TestParsePart:
    def test_reads_part_heading_and_intro(self):
        part = parse_part(PART_TEXT, source="part-9.md")
        assert part.number == 9
        assert part.title == "Practice"
        assert part.intro == "Warm-up queries."
        assert part.source == "part-9.md"

    def test_reads_challenges_in_order(self):
        part = parse_part(PART_TEXT)
        assert [c.key for c in part.challenges] == ["9.1", "9.2"]
        first = part.challenges[0]
        assert first.title == "First One"
        assert first.topics == ["SELECT", "WHERE"]
        assert first.problem == "List something."
        assert first.notes == "Nothing special."

    def test_fenced_heading_is_not_a_challenge(self):
        part = parse_part(PART_TEXT)
        assert len(part.challenges) == 2
        assert "Challenge 99" in part.challenges[0].solution

    def test_solution_is_first_sql_block(self):
        second = parse_part(PART_TEXT).challenges[1]
        assert second.solution == "SELECT COUNT(*) FROM employees;"
        assert second.expected == ""
        assert second.topics == []

    def test_expected_keeps_code_block(self):
        first = parse_part(PART_TEXT).challenges[0]
        assert first.expected.startswith("```text")
        assert "(1 row)" in first.expected

    def test_missing_part_heading(self):
        with pytest.raises(CurriculumError, match="Part N"):
            parse_part("## Challenge 1: Orphan\n")

    def test_missing_solution(self):
        text = "# Part 1: X\n## Challenge 1: Y\n### Problem\nDo it.\n"
        with pytest.raises(CurriculumError, match="no ```sql solution"):
            parse_part(text)

    def test_missing_problem(self):
        text = "# Part 1: X\n## Challenge 1: Y\n### Solution\n```sql\nSELECT 1;\n```\n"
        with pytest.raises(CurriculumError, match="no Problem"):
            parse_part(text)

    def test_unknown_section(self):
        text = "# Part 1: X\n## Challenge 1: Y\n### Hints\nnope\n"
        with pytest.raises(CurriculumError, match="unknown section"):
            parse_part(text)

    def test_unterminated_fence(self):
        text = "# Part 1: X\n## Challenge 1: Y\n### Problem\nP\n### Solution\n```sql\nSELECT 1;\n"
        with pytest.raises(CurriculumError, match="unterminated"):
            parse_part(text)


def test_extract_sql_without_block():
    assert extract_sql("just prose") == ""
