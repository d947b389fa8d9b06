"""RatioExpressionInput rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._values import NonNegativeInt, Ratio, ValueTag

if TYPE_CHECKING:
    from answer_classify._classifier import Classifier
    from answer_classify._registry import RegistryBuilder

INTERACTION_KIND = "RatioExpressionInput"


def equals(answer: Ratio, input: Ratio) -> bool:
    return answer.terms == input.terms


def is_equivalent(answer: Ratio, input: Ratio) -> bool:
    # 2:4 and 1:2 reduce to the same terms; 1:2 and 1:2:3 never do.
    return answer.to_simplest_form() == input.to_simplest_form()


def has_number_of_terms_equal_to(answer: Ratio, input: NonNegativeInt) -> bool:
    return len(answer.terms) == input.value


_R = ValueTag.RATIO

RULES: tuple[tuple[str, Classifier], ...] = (
    ("Equals", ClassifierFactory.create(_R, "x", equals)),
    ("IsEquivalent", ClassifierFactory.create(_R, "x", is_equivalent)),
    (
        "HasNumberOfTermsEqualTo",
        ClassifierFactory.create_multi_type(
            _R, "y", ValueTag.NON_NEGATIVE_INT, has_number_of_terms_equal_to
        ),
    ),
)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all RatioExpressionInput rules under ``RatioExpressionInput``."""
    for rule_type, classifier in RULES:
        builder.add(INTERACTION_KIND, rule_type, classifier)
    return builder
