"""answer_classify.interactions: built-in rule tables.

Each interaction module declares one matcher function per rule and a
``register(builder)`` function that adds its table to a RegistryBuilder.
"""

from __future__ import annotations

from functools import cache

from answer_classify._engine import ClassificationEngine
from answer_classify._registry import Registry, RegistryBuilder
from answer_classify.interactions import (
    _fraction_input,
    _numeric_input,
    _ratio_input,
    _selection_input,
    _text_input,
)

FRACTION_INPUT = _fraction_input.INTERACTION_KIND
NUMERIC_INPUT = _numeric_input.INTERACTION_KIND
TEXT_INPUT = _text_input.INTERACTION_KIND
MULTIPLE_CHOICE_INPUT = _selection_input.MULTIPLE_CHOICE_KIND
ITEM_SELECTION_INPUT = _selection_input.ITEM_SELECTION_KIND
RATIO_EXPRESSION_INPUT = _ratio_input.INTERACTION_KIND

register_fraction_input = _fraction_input.register
register_numeric_input = _numeric_input.register
register_text_input = _text_input.register
register_selection_inputs = _selection_input.register
register_ratio_expression_input = _ratio_input.register


def register_all(builder: RegistryBuilder) -> RegistryBuilder:
    """Register every built-in interaction."""
    register_fraction_input(builder)
    register_numeric_input(builder)
    register_text_input(builder)
    register_selection_inputs(builder)
    register_ratio_expression_input(builder)
    return builder


def default_registry() -> Registry:
    return register_all(RegistryBuilder()).build()


@cache
def default_engine() -> ClassificationEngine:
    """Shared engine over the built-in registry, built on first use."""
    return ClassificationEngine(default_registry())


__all__ = [
    # Interaction kinds
    "FRACTION_INPUT",
    "NUMERIC_INPUT",
    "TEXT_INPUT",
    "MULTIPLE_CHOICE_INPUT",
    "ITEM_SELECTION_INPUT",
    "RATIO_EXPRESSION_INPUT",
    # Registration
    "register_fraction_input",
    "register_numeric_input",
    "register_text_input",
    "register_selection_inputs",
    "register_ratio_expression_input",
    "register_all",
    "default_registry",
    "default_engine",
]
