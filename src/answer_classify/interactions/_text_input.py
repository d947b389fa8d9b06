"""TextInput rules.

All rules except CaseSensitiveEquals compare normalized text: surrounding
whitespace stripped, internal whitespace runs collapsed to one space, and
case folded. Learner text is untrusted, so the whitespace pattern runs on
``google-re2`` (linear time).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import re2

from answer_classify._classifier import ClassifierFactory
from answer_classify._values import Text, ValueTag

if TYPE_CHECKING:
    from answer_classify._classifier import Classifier
    from answer_classify._registry import RegistryBuilder

INTERACTION_KIND = "TextInput"

_WHITESPACE_RUN = re2.compile(r"\s+")


def normalize(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text.strip()).casefold()


def _within_one_edit(a: str, b: str) -> bool:
    """True if a single insert, delete or substitution turns a into b."""
    if len(a) > len(b):
        a, b = b, a
    if len(b) - len(a) > 1:
        return False
    i = 0
    while i < len(a) and a[i] == b[i]:
        i += 1
    if len(a) == len(b):
        return a[i + 1 :] == b[i + 1 :]
    return a[i:] == b[i + 1 :]


def equals(answer: Text, input: Text) -> bool:
    return normalize(answer.value) == normalize(input.value)


def case_sensitive_equals(answer: Text, input: Text) -> bool:
    return answer.value == input.value


def starts_with(answer: Text, input: Text) -> bool:
    return normalize(answer.value).startswith(normalize(input.value))


def contains(answer: Text, input: Text) -> bool:
    return normalize(input.value) in normalize(answer.value)


def fuzzy_equals(answer: Text, input: Text) -> bool:
    return _within_one_edit(normalize(answer.value), normalize(input.value))


_T = ValueTag.TEXT

RULES: tuple[tuple[str, Classifier], ...] = (
    ("Equals", ClassifierFactory.create(_T, "x", equals)),
    ("CaseSensitiveEquals", ClassifierFactory.create(_T, "x", case_sensitive_equals)),
    ("StartsWith", ClassifierFactory.create(_T, "x", starts_with)),
    ("Contains", ClassifierFactory.create(_T, "x", contains)),
    ("FuzzyEquals", ClassifierFactory.create(_T, "x", fuzzy_equals)),
)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all TextInput rules under ``TextInput``."""
    for rule_type, classifier in RULES:
        builder.add(INTERACTION_KIND, rule_type, classifier)
    return builder
