"""Classifier registry keyed by (interaction kind, rule type).

Architecture:
- RegistryBuilder collects classifiers at startup → .build() → Registry
- Registry is immutable; lookups are read-only and safe to share
- Duplicate keys fail fast with DuplicateRegistrationError (never override)

Example::

    builder = RegistryBuilder()
    builder.register("FractionInput", "IsLessThan", ValueTag.FRACTION, "f", is_less_than)
    registry = builder.build()

    classifier = registry.lookup("FractionInput", "IsLessThan")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from answer_classify._classifier import ClassifierFactory
from answer_classify._errors import DuplicateRegistrationError, InvalidClassifierError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from answer_classify._classifier import Classifier, SingleInputMatcher
    from answer_classify._values import ValueTag

logger = logging.getLogger(__name__)

type RegistryKey = tuple[str, str]


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register classifiers under (interaction kind, rule type), then call
    build() to produce an immutable Registry. Intended for single-threaded
    use at process start.
    """

    def __init__(self) -> None:
        self._classifiers: dict[RegistryKey, Classifier] = {}

    def add(
        self, interaction_kind: str, rule_type: str, classifier: Classifier
    ) -> RegistryBuilder:
        """Register a pre-built classifier.

        Raises:
            DuplicateRegistrationError: the key is already registered.
            InvalidClassifierError: the interaction kind or rule type is empty.
        """
        if not interaction_kind or not rule_type:
            msg = "interaction kind and rule type must be non-empty"
            raise InvalidClassifierError(msg)
        key = (interaction_kind, rule_type)
        if key in self._classifiers:
            raise DuplicateRegistrationError(interaction_kind, rule_type)
        self._classifiers[key] = classifier
        logger.debug("registered classifier %s/%s", interaction_kind, rule_type)
        return self

    def register(
        self,
        interaction_kind: str,
        rule_type: str,
        expected_tag: ValueTag,
        expected_param_name: str,
        matcher: SingleInputMatcher,
    ) -> RegistryBuilder:
        """Register a single-input matcher whose input shares the answer's tag."""
        classifier = ClassifierFactory.create(expected_tag, expected_param_name, matcher)
        return self.add(interaction_kind, rule_type, classifier)

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        registry = Registry(_classifiers=MappingProxyType(dict(self._classifiers)))
        logger.info(
            "built classifier registry: %d rules across %d interactions",
            len(registry),
            len(registry.interaction_kinds()),
        )
        return registry


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable mapping of (interaction kind, rule type) to Classifier.

    Constructed via RegistryBuilder or from_entries().
    """

    _classifiers: MappingProxyType[RegistryKey, Classifier] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[RegistryKey, Classifier]]) -> Registry:
        """Build a registry from explicit ((kind, rule), classifier) pairs.

        Raises:
            DuplicateRegistrationError: two entries share a key.
        """
        builder = RegistryBuilder()
        for (interaction_kind, rule_type), classifier in entries:
            builder.add(interaction_kind, rule_type, classifier)
        return builder.build()

    def lookup(self, interaction_kind: str, rule_type: str) -> Classifier | None:
        return self._classifiers.get((interaction_kind, rule_type))

    def contains(self, interaction_kind: str, rule_type: str) -> bool:
        return (interaction_kind, rule_type) in self._classifiers

    def __len__(self) -> int:
        return len(self._classifiers)

    def keys(self) -> list[RegistryKey]:
        """Return all registered keys (sorted)."""
        return sorted(self._classifiers.keys())

    def interaction_kinds(self) -> list[str]:
        """Return the distinct interaction kinds (sorted)."""
        return sorted({kind for kind, _ in self._classifiers})

    def rule_types(self, interaction_kind: str) -> list[str]:
        """Return the rule types registered for one interaction kind (sorted)."""
        return sorted(
            rule for kind, rule in self._classifiers if kind == interaction_kind
        )
