"""Tests for NumericInput rules."""

from __future__ import annotations

import pytest

from answer_classify import ClassificationEngine, Err, Fraction, Number, Ok, TypeMismatchError
from answer_classify.interactions import NUMERIC_INPUT
from answer_classify.testing import rule


def _classify(engine: ClassificationEngine, rule_type: str, answer: float, **inputs: float) -> object:
    spec = rule(rule_type, **{name: Number(v) for name, v in inputs.items()})
    return engine.classify(NUMERIC_INPUT, spec, Number(answer))


class TestComparisons:
    @pytest.mark.parametrize(
        ("rule_type", "answer", "x", "expected"),
        [
            ("Equals", 2.5, 2.5, True),
            ("Equals", 2, 2.0, True),
            ("Equals", 0.1 + 0.2, 0.3, False),
            ("IsLessThan", 1, 2, True),
            ("IsLessThan", 2, 2, False),
            ("IsGreaterThan", -1, -2, True),
            ("IsGreaterThan", 2, 2, False),
            ("IsLessThanOrEqualTo", 2, 2, True),
            ("IsLessThanOrEqualTo", 3, 2, False),
            ("IsGreaterThanOrEqualTo", 2, 2, True),
            ("IsGreaterThanOrEqualTo", 1, 2, False),
        ],
    )
    def test_single_input(
        self,
        engine: ClassificationEngine,
        rule_type: str,
        answer: float,
        x: float,
        expected: bool,
    ) -> None:
        assert _classify(engine, rule_type, answer, x=x) == Ok(expected)


class TestRanges:
    @pytest.mark.parametrize(
        ("answer", "expected"),
        [(1, True), (1.5, True), (2, True), (0.999, False), (2.001, False)],
    )
    def test_inclusively_between(
        self, engine: ClassificationEngine, answer: float, expected: bool
    ) -> None:
        assert _classify(engine, "IsInclusivelyBetween", answer, a=1, b=2) == Ok(expected)

    def test_inverted_range_matches_nothing(self, engine: ClassificationEngine) -> None:
        assert _classify(engine, "IsInclusivelyBetween", 1.5, a=2, b=1) == Ok(False)

    @pytest.mark.parametrize(
        ("answer", "expected"),
        [(10, True), (10.5, True), (9.5, True), (10.75, False), (9, False)],
    )
    def test_within_tolerance(
        self, engine: ClassificationEngine, answer: float, expected: bool
    ) -> None:
        assert _classify(engine, "IsWithinTolerance", answer, x=10, tol=0.5) == Ok(expected)

    def test_negative_tolerance_matches_nothing(self, engine: ClassificationEngine) -> None:
        assert _classify(engine, "IsWithinTolerance", 10, x=10, tol=-1) == Ok(False)


class TestTypeGate:
    def test_fraction_answer_rejected(self, engine: ClassificationEngine) -> None:
        result = engine.classify(
            NUMERIC_INPUT, rule("Equals", x=Number(0.5)), Fraction(numerator=1, denominator=2)
        )
        assert isinstance(result, Err)
        assert isinstance(result.error, TypeMismatchError)
        assert result.error.param_name is None
