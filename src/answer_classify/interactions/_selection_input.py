"""MultipleChoiceInput and ItemSelectionInput rules.

Item selections are compared as sets: order and repeats are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._values import NonNegativeInt, TextList, ValueTag

if TYPE_CHECKING:
    from answer_classify._classifier import Classifier
    from answer_classify._registry import RegistryBuilder

MULTIPLE_CHOICE_KIND = "MultipleChoiceInput"
ITEM_SELECTION_KIND = "ItemSelectionInput"


def choice_equals(answer: NonNegativeInt, input: NonNegativeInt) -> bool:
    return answer.value == input.value


def selection_equals(answer: TextList, input: TextList) -> bool:
    return answer.as_set() == input.as_set()


def contains_at_least_one_of(answer: TextList, input: TextList) -> bool:
    return not answer.as_set().isdisjoint(input.as_set())


def does_not_contain_at_least_one_of(answer: TextList, input: TextList) -> bool:
    """True when some item of ``input`` is missing from the answer."""
    return not input.as_set() <= answer.as_set()


def is_proper_subset_of(answer: TextList, input: TextList) -> bool:
    return answer.as_set() < input.as_set()


_L = ValueTag.TEXT_LIST

MULTIPLE_CHOICE_RULES: tuple[tuple[str, Classifier], ...] = (
    ("Equals", ClassifierFactory.create(ValueTag.NON_NEGATIVE_INT, "x", choice_equals)),
)

ITEM_SELECTION_RULES: tuple[tuple[str, Classifier], ...] = (
    ("Equals", ClassifierFactory.create(_L, "x", selection_equals)),
    ("ContainsAtLeastOneOf", ClassifierFactory.create(_L, "x", contains_at_least_one_of)),
    (
        "DoesNotContainAtLeastOneOf",
        ClassifierFactory.create(_L, "x", does_not_contain_at_least_one_of),
    ),
    ("IsProperSubsetOf", ClassifierFactory.create(_L, "x", is_proper_subset_of)),
)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register MultipleChoiceInput and ItemSelectionInput rules."""
    for rule_type, classifier in MULTIPLE_CHOICE_RULES:
        builder.add(MULTIPLE_CHOICE_KIND, rule_type, classifier)
    for rule_type, classifier in ITEM_SELECTION_RULES:
        builder.add(ITEM_SELECTION_KIND, rule_type, classifier)
    return builder
