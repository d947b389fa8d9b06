"""Classification benchmarks.

Measures the hot path: registry lookup + parameter gate + matcher, for a
single rule and for first-match-wins scans over answer groups.

Run: uv run pytest tests/bench/ --benchmark-only
"""

from __future__ import annotations

import pytest

from answer_classify import AnswerGroup, Ok, Text, default_engine
from answer_classify.interactions import FRACTION_INPUT, TEXT_INPUT
from answer_classify.testing import frac, rule


# ── Fixtures ─────────────────────────────────────────────────────────────────


def fraction_groups(n: int) -> tuple[AnswerGroup[str], ...]:
    """n groups that never match 1/2, followed by one that does."""
    misses = tuple(
        AnswerGroup(f"miss_{i}", (rule("IsEquivalentTo", f=frac(f"{i + 3}/{i + 2}")),))
        for i in range(n)
    )
    return (*misses, AnswerGroup("hit", (rule("IsLessThan", f=frac("3/4")),)))


# ── Single rule ──────────────────────────────────────────────────────────────


def test_bench_fraction_is_less_than(benchmark) -> None:  # noqa: ANN001
    engine = default_engine()
    spec = rule("IsLessThan", f=frac("3/4"))
    answer = frac("1/2")
    assert benchmark(engine.classify, FRACTION_INPUT, spec, answer) == Ok(True)


def test_bench_text_fuzzy_equals(benchmark) -> None:  # noqa: ANN001
    engine = default_engine()
    spec = rule("FuzzyEquals", x=Text("photosynthesis"))
    answer = Text("  Photosynthesys ")
    assert benchmark(engine.classify, TEXT_INPUT, spec, answer) == Ok(True)


def test_bench_unknown_rule(benchmark) -> None:  # noqa: ANN001
    engine = default_engine()
    spec = rule("IsPrime")
    answer = frac("1/2")
    result = benchmark(engine.classify, FRACTION_INPUT, spec, answer)
    assert not result.is_ok


# ── Answer groups ────────────────────────────────────────────────────────────


@pytest.mark.parametrize("n", [1, 10, 100])
def test_bench_groups_last_match(benchmark, n: int) -> None:  # noqa: ANN001
    engine = default_engine()
    groups = fraction_groups(n)
    answer = frac("1/2")
    assert benchmark(engine.classify_groups, FRACTION_INPUT, groups, answer) == Ok("hit")
