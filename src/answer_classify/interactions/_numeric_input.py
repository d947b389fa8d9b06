"""NumericInput rules. All inputs are Numbers compared as exact rationals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._values import Number, ValueTag, to_comparable

if TYPE_CHECKING:
    from answer_classify._classifier import Classifier
    from answer_classify._registry import RegistryBuilder

INTERACTION_KIND = "NumericInput"


def equals(answer: Number, input: Number) -> bool:
    return to_comparable(answer) == to_comparable(input)


def is_less_than(answer: Number, input: Number) -> bool:
    return to_comparable(answer) < to_comparable(input)


def is_greater_than(answer: Number, input: Number) -> bool:
    return to_comparable(answer) > to_comparable(input)


def is_less_than_or_equal_to(answer: Number, input: Number) -> bool:
    return to_comparable(answer) <= to_comparable(input)


def is_greater_than_or_equal_to(answer: Number, input: Number) -> bool:
    return to_comparable(answer) >= to_comparable(input)


def is_inclusively_between(answer: Number, lower: Number, upper: Number) -> bool:
    """An inverted range (lower > upper) matches nothing."""
    value = to_comparable(answer)
    return to_comparable(lower) <= value <= to_comparable(upper)


def is_within_tolerance(answer: Number, input: Number, tolerance: Number) -> bool:
    """A negative tolerance matches nothing."""
    return abs(to_comparable(answer) - to_comparable(input)) <= to_comparable(tolerance)


_N = ValueTag.NUMBER

RULES: tuple[tuple[str, Classifier], ...] = (
    ("Equals", ClassifierFactory.create(_N, "x", equals)),
    ("IsLessThan", ClassifierFactory.create(_N, "x", is_less_than)),
    ("IsGreaterThan", ClassifierFactory.create(_N, "x", is_greater_than)),
    ("IsLessThanOrEqualTo", ClassifierFactory.create(_N, "x", is_less_than_or_equal_to)),
    (
        "IsGreaterThanOrEqualTo",
        ClassifierFactory.create(_N, "x", is_greater_than_or_equal_to),
    ),
    (
        "IsInclusivelyBetween",
        ClassifierFactory.create_double_input(_N, "a", "b", is_inclusively_between),
    ),
    (
        "IsWithinTolerance",
        ClassifierFactory.create_double_input(_N, "x", "tol", is_within_tolerance),
    ),
)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all NumericInput rules under ``NumericInput``."""
    for rule_type, classifier in RULES:
        builder.add(INTERACTION_KIND, rule_type, classifier)
    return builder
