"""Classification engine: the public entry point for grading answers.

classify() looks up the classifier for (interaction kind, rule type) and
delegates to Classifier.evaluate(). It never raises for classification
errors; every failure comes back as an Err.

classify_groups() evaluates an interaction's ordered answer groups with
first-match-wins semantics:
- groups evaluated in order; the first group with a matching rule wins
- rules within a group are ORed (short-circuit on the first match)
- the default outcome is the fallback when no group matches
- the first Err from an evaluated rule is returned immediately
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from answer_classify._errors import UnknownRuleError
from answer_classify._result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Sequence

    from answer_classify._registry import Registry
    from answer_classify._values import TypedValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """A rule type plus its named inputs, as authored for an interaction.

    Inputs are copied into a read-only mapping at construction.
    """

    rule_type: str
    inputs: Mapping[str, TypedValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))


@dataclass(frozen=True, slots=True)
class AnswerGroup[O]:
    """Rules that share an outcome. Matches when any rule matches.

    An empty rule tuple never matches.
    """

    outcome: O
    rules: tuple[RuleSpec, ...]


@dataclass(frozen=True, slots=True)
class InteractionSpec[O]:
    """An interaction's complete grading configuration."""

    interaction_kind: str
    answer_groups: tuple[AnswerGroup[O], ...]
    default_outcome: O | None = None


class ClassificationEngine:
    """Evaluates answers against rules using a frozen Registry.

    Holds no mutable state; one engine can serve any number of callers.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    def classify(
        self, interaction_kind: str, rule_spec: RuleSpec, answer: Any
    ) -> Result[bool]:
        """Decide whether ``answer`` satisfies ``rule_spec``.

        Returns Ok(bool) on a verdict, or Err carrying UnknownRuleError,
        MissingParameterError, TypeMismatchError or UnsupportedVariantError.
        """
        classifier = self._registry.lookup(interaction_kind, rule_spec.rule_type)
        if classifier is None:
            error = UnknownRuleError(
                interaction_kind,
                rule_spec.rule_type,
                self._registry.rule_types(interaction_kind),
            )
            logger.debug("classification failed: %s", error)
            return Err(error)

        result = classifier.evaluate(answer, rule_spec.inputs)
        if isinstance(result, Err):
            logger.debug(
                "classification of %s/%s failed: %s",
                interaction_kind,
                rule_spec.rule_type,
                result.error,
            )
        return result

    def classify_groups[O](
        self,
        interaction_kind: str,
        groups: Sequence[AnswerGroup[O]],
        answer: Any,
        default_outcome: O | None = None,
    ) -> Result[O | None]:
        """Return the outcome of the first matching group.

        Falls back to ``default_outcome`` (which may be None) when nothing
        matches. Rules after the first match are not evaluated.
        """
        for group in groups:
            for rule in group.rules:
                match self.classify(interaction_kind, rule, answer):
                    case Err() as err:
                        return err
                    case Ok(value=True):
                        return Ok(group.outcome)
        return Ok(default_outcome)

    def classify_interaction[O](
        self, spec: InteractionSpec[O], answer: Any
    ) -> Result[O | None]:
        return self.classify_groups(
            spec.interaction_kind,
            spec.answer_groups,
            answer,
            spec.default_outcome,
        )
