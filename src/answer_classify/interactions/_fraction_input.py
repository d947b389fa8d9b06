"""FractionInput rules.

Magnitude rules (equivalence, ordering) compare exact comparable forms,
so 1/2 and 2/4 are equal. Structural rules (numerator, denominator,
integer part, exact equality) compare the components as entered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._values import Fraction, Integer, NonNegativeInt, ValueTag, to_comparable

if TYPE_CHECKING:
    from answer_classify._classifier import Classifier
    from answer_classify._registry import RegistryBuilder

INTERACTION_KIND = "FractionInput"


def is_exactly_equal_to(answer: Fraction, input: Fraction) -> bool:
    return answer == input


def is_equivalent_to(answer: Fraction, input: Fraction) -> bool:
    return to_comparable(answer) == to_comparable(input)


def is_equivalent_to_and_in_simplest_form(answer: Fraction, input: Fraction) -> bool:
    return is_equivalent_to(answer, input) and answer == answer.to_simplest_form()


def is_less_than(answer: Fraction, input: Fraction) -> bool:
    return to_comparable(answer) < to_comparable(input)


def is_greater_than(answer: Fraction, input: Fraction) -> bool:
    return to_comparable(answer) > to_comparable(input)


def has_numerator_equal_to(answer: Fraction, input: Integer) -> bool:
    return answer.numerator == input.value


def has_denominator_equal_to(answer: Fraction, input: NonNegativeInt) -> bool:
    return answer.denominator == input.value


def has_integer_part_equal_to(answer: Fraction, input: Integer) -> bool:
    return answer.integer_part == input.value


def has_no_fractional_part(answer: Fraction) -> bool:
    return answer.numerator == 0


def has_fractional_part_exactly_equal_to(answer: Fraction, input: Fraction) -> bool:
    return (
        answer.numerator == input.numerator
        and answer.denominator == input.denominator
    )


_F = ValueTag.FRACTION

RULES: tuple[tuple[str, Classifier], ...] = (
    ("IsExactlyEqualTo", ClassifierFactory.create(_F, "f", is_exactly_equal_to)),
    ("IsEquivalentTo", ClassifierFactory.create(_F, "f", is_equivalent_to)),
    (
        "IsEquivalentToAndInSimplestForm",
        ClassifierFactory.create(_F, "f", is_equivalent_to_and_in_simplest_form),
    ),
    ("IsLessThan", ClassifierFactory.create(_F, "f", is_less_than)),
    ("IsGreaterThan", ClassifierFactory.create(_F, "f", is_greater_than)),
    (
        "HasNumeratorEqualTo",
        ClassifierFactory.create_multi_type(
            _F, "x", ValueTag.INTEGER, has_numerator_equal_to
        ),
    ),
    (
        "HasDenominatorEqualTo",
        ClassifierFactory.create_multi_type(
            _F, "x", ValueTag.NON_NEGATIVE_INT, has_denominator_equal_to
        ),
    ),
    (
        "HasIntegerPartEqualTo",
        ClassifierFactory.create_multi_type(
            _F, "x", ValueTag.INTEGER, has_integer_part_equal_to
        ),
    ),
    ("HasNoFractionalPart", ClassifierFactory.create_no_input(_F, has_no_fractional_part)),
    (
        "HasFractionalPartExactlyEqualTo",
        ClassifierFactory.create(_F, "f", has_fractional_part_exactly_equal_to),
    ),
)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all FractionInput rules under ``FractionInput``."""
    for rule_type, classifier in RULES:
        builder.add(INTERACTION_KIND, rule_type, classifier)
    return builder
