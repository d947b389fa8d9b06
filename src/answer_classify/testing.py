"""Test utilities for answer_classify.

Provides shorthands for building values and rule specs, plus a tiny test
interaction. These are NOT built-in interactions; they exist to reduce
boilerplate in tests and examples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._config import parse_fraction
from answer_classify._engine import RuleSpec
from answer_classify._values import Boolean, Fraction, Text, ValueTag

if TYPE_CHECKING:
    from answer_classify._registry import RegistryBuilder
    from answer_classify._values import TypedValue

TEST_INTERACTION = "test.v1.TestInput"


def frac(text: str) -> Fraction:
    """Build a Fraction from its written form.

    >>> frac("-1 1/2").to_float()
    -1.5
    """
    return parse_fraction(text)


def rule(rule_type: str, /, **inputs: TypedValue) -> RuleSpec:
    """Build a RuleSpec from keyword inputs.

    >>> rule("IsLessThan", f=frac("3/4")).rule_type
    'IsLessThan'
    """
    return RuleSpec(rule_type=rule_type, inputs=inputs)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the test interaction.

    Rules under ``test.v1.TestInput``:
    - Equals (x: Text): exact string equality
    - IsTrue (): Boolean answer is True
    """
    builder.register(TEST_INTERACTION, "Equals", ValueTag.TEXT, "x", _text_equals)
    builder.add(
        TEST_INTERACTION,
        "IsTrue",
        ClassifierFactory.create_no_input(ValueTag.BOOLEAN, _is_true),
    )
    return builder


def _text_equals(answer: Text, input: Text) -> bool:
    return answer.value == input.value


def _is_true(answer: Boolean) -> bool:
    return answer.value
