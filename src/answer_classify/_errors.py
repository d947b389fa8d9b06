"""Error taxonomy for answer classification.

None of these are transient: every one points at a defect in the rule
configuration, the registry wiring, or the answer-input layer.

Construction problems raise (DuplicateRegistrationError,
InvalidClassifierError, InvalidValueError). Evaluation problems are
returned as ``Err`` values by Classifier.evaluate() and
ClassificationEngine.classify().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from answer_classify._values import ValueTag


class ClassificationError(Exception):
    """Base class for all classification errors."""


# ═══════════════════════════════════════════════════════════════════════════════
# Construction-time errors (raised)
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidValueError(ClassificationError):
    """A TypedValue was constructed with fields that break its invariants."""


class InvalidFractionError(InvalidValueError):
    """A Fraction has a zero denominator or a negative component."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid fraction: {reason}")


class InvalidClassifierError(ClassificationError):
    """A classifier was built with bad metadata (empty or repeated names)."""


class DuplicateRegistrationError(ClassificationError):
    """Two providers claimed the same (interaction kind, rule type) key."""

    def __init__(self, interaction_kind: str, rule_type: str) -> None:
        self.interaction_kind = interaction_kind
        self.rule_type = rule_type
        super().__init__(
            f"duplicate classifier registration for "
            f"{interaction_kind!r} rule {rule_type!r}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Evaluation-time errors (returned as Err)
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownRuleError(ClassificationError):
    """No classifier is registered for the requested key."""

    def __init__(
        self, interaction_kind: str, rule_type: str, available: list[str]
    ) -> None:
        self.interaction_kind = interaction_kind
        self.rule_type = rule_type
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = (
                f"unknown rule {rule_type!r} for {interaction_kind!r} "
                f"(registered: {registered})"
            )
        else:
            msg = (
                f"unknown rule {rule_type!r} for {interaction_kind!r} "
                f"(no rules are registered for this interaction)"
            )
        super().__init__(msg)


class MissingParameterError(ClassificationError):
    """The rule inputs lack a parameter the classifier expects."""

    def __init__(self, param_name: str, provided: list[str]) -> None:
        self.param_name = param_name
        self.provided = sorted(provided)
        super().__init__(
            f"missing rule parameter {param_name!r} "
            f"(provided: {', '.join(self.provided) or 'none'})"
        )


class TypeMismatchError(ClassificationError):
    """An answer or parameter carries a different variant than expected.

    ``param_name`` is None when the mismatch is on the answer itself.
    """

    def __init__(
        self, expected: ValueTag, actual: str, param_name: str | None = None
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.param_name = param_name
        subject = "answer" if param_name is None else f"parameter {param_name!r}"
        super().__init__(
            f"{subject} has type {actual}, expected {expected.value}"
        )


class UnsupportedVariantError(ClassificationError):
    """A comparable form was requested for a variant with no ordering."""

    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"{actual} values have no comparable numeric form")
