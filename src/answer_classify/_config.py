"""Config parsing for rule specs and interaction grading configuration.

Config-driven construction path:
  dict / YAML → parse_interaction_spec() → InteractionSpec → engine.classify_interaction()

Typed values use a single-key variant discriminant, the same way the
value_match shape names its variant::

    {"Fraction": {"is_negative": false, "whole_number": 0, "numerator": 1, "denominator": 2}}
    {"Fraction": "-1 1/2"}
    {"Number": 2.5}
    {"TextList": ["ca_choice_0", "ca_choice_2"]}
    {"Ratio": "1:2:3"}

A rule spec::

    {"rule_type": "IsLessThan", "inputs": {"f": {"Fraction": "3/4"}}}

An interaction::

    {
        "interaction": "FractionInput",
        "answer_groups": [{"outcome": "correct", "rules": [...]}],
        "default_outcome": "try_again",
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import re2
import yaml

from answer_classify._engine import AnswerGroup, InteractionSpec, RuleSpec
from answer_classify._errors import InvalidValueError
from answer_classify._values import (
    Boolean,
    Fraction,
    Integer,
    NonNegativeInt,
    Number,
    Ratio,
    Text,
    TextList,
    TypedValue,
    ValueTag,
)


class ConfigParseError(Exception):
    """Error parsing a config dict into rule or value types."""


# "-1 2/3" (mixed), "2/3" (proper or improper), "5" (whole).
_FRACTION_PATTERN = re2.compile(
    r"\s*(-)?\s*(?:(\d+)\s+(\d+)\s*/\s*(\d+)|(\d+)\s*/\s*(\d+)|(\d+))\s*"
)
_RATIO_PATTERN = re2.compile(r"\s*\d+(?:\s*:\s*\d+)+\s*")

_FRACTION_FIELDS = frozenset({"is_negative", "whole_number", "numerator", "denominator"})


# ═══════════════════════════════════════════════════════════════════════════════
# Learner-style string forms
# ═══════════════════════════════════════════════════════════════════════════════


def parse_fraction(text: str) -> Fraction:
    """Parse a fraction written the way a learner types it.

    Raises:
        ConfigParseError: the text is not a fraction.
        InvalidFractionError: the fraction has a zero denominator.
    """
    m = _FRACTION_PATTERN.fullmatch(text)
    if m is None:
        msg = f"not a fraction: {text!r}"
        raise ConfigParseError(msg)

    is_negative = m.group(1) is not None
    if m.group(2) is not None:
        return Fraction(is_negative, int(m.group(2)), int(m.group(3)), int(m.group(4)))
    if m.group(5) is not None:
        return Fraction(is_negative, 0, int(m.group(5)), int(m.group(6)))
    return Fraction(is_negative, int(m.group(7)), 0, 1)


def parse_ratio(text: str) -> Ratio:
    """Parse a ratio such as ``"1:2:3"``.

    Raises:
        ConfigParseError: the text is not a ratio.
        InvalidValueError: a term is zero.
    """
    if _RATIO_PATTERN.fullmatch(text) is None:
        msg = f"not a ratio: {text!r}"
        raise ConfigParseError(msg)
    return Ratio(tuple(int(term) for term in text.split(":")))


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → value / rule types)
# ═══════════════════════════════════════════════════════════════════════════════


def parse_typed_value(data: dict[str, Any]) -> TypedValue:
    """Parse a single-key variant dict into a TypedValue.

    Raises:
        ConfigParseError: malformed dict, unknown variant, or a value that
            breaks the variant's invariants.
    """
    if not isinstance(data, dict):
        msg = f"typed value must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if len(data) != 1:
        expected = sorted(tag.value for tag in ValueTag)
        msg = f"typed value must have exactly one of {expected}, got keys: {sorted(data)}"
        raise ConfigParseError(msg)

    variant, payload = next(iter(data.items()))
    try:
        tag = ValueTag(variant)
    except ValueError:
        expected = sorted(t.value for t in ValueTag)
        msg = f"unknown typed value variant {variant!r} (expected one of {expected})"
        raise ConfigParseError(msg) from None

    try:
        return _build_value(tag, payload)
    except InvalidValueError as e:
        raise ConfigParseError(str(e)) from e


def _build_value(tag: ValueTag, payload: Any) -> TypedValue:
    match tag:
        case ValueTag.FRACTION:
            return _parse_fraction_payload(payload)
        case ValueTag.NUMBER:
            return Number(payload)
        case ValueTag.INTEGER:
            return Integer(payload)
        case ValueTag.NON_NEGATIVE_INT:
            return NonNegativeInt(payload)
        case ValueTag.TEXT:
            return Text(payload)
        case ValueTag.TEXT_LIST:
            return TextList(payload)
        case ValueTag.RATIO:
            if isinstance(payload, str):
                return parse_ratio(payload)
            return Ratio(payload)
        case ValueTag.BOOLEAN:
            return Boolean(payload)


def _parse_fraction_payload(payload: Any) -> Fraction:
    if isinstance(payload, str):
        return parse_fraction(payload)
    if not isinstance(payload, dict):
        msg = f"Fraction must be a string or a dict, got {type(payload).__name__}"
        raise ConfigParseError(msg)
    unknown = set(payload) - _FRACTION_FIELDS
    if unknown:
        msg = f"unknown Fraction fields: {sorted(unknown)}"
        raise ConfigParseError(msg)
    return Fraction(**payload)


def parse_rule_spec(data: dict[str, Any]) -> RuleSpec:
    """Parse a rule spec dict.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"rule spec must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    rule_type = data.get("rule_type")
    if rule_type is None:
        msg = "rule spec missing required field 'rule_type'"
        raise ConfigParseError(msg)
    if not isinstance(rule_type, str) or not rule_type:
        msg = f"'rule_type' must be a non-empty string, got {rule_type!r}"
        raise ConfigParseError(msg)

    raw_inputs = data.get("inputs", {})
    if not isinstance(raw_inputs, dict):
        msg = f"'inputs' must be a dict, got {type(raw_inputs).__name__}"
        raise ConfigParseError(msg)

    inputs = {str(name): parse_typed_value(value) for name, value in raw_inputs.items()}
    return RuleSpec(rule_type=rule_type, inputs=inputs)


def parse_answer_group(data: dict[str, Any]) -> AnswerGroup[Any]:
    """Parse an answer group dict: an outcome plus its rules."""
    if not isinstance(data, dict):
        msg = f"answer group must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if "outcome" not in data:
        msg = "answer group missing required field 'outcome'"
        raise ConfigParseError(msg)

    raw_rules = data.get("rules")
    if not isinstance(raw_rules, list):
        msg = f"'rules' must be a list, got {type(raw_rules).__name__}"
        raise ConfigParseError(msg)

    return AnswerGroup(
        outcome=data["outcome"],
        rules=tuple(parse_rule_spec(r) for r in raw_rules),
    )


def parse_interaction_spec(data: dict[str, Any]) -> InteractionSpec[Any]:
    """Parse an interaction's grading configuration.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    kind = data.get("interaction")
    if not isinstance(kind, str) or not kind:
        msg = f"'interaction' must be a non-empty string, got {kind!r}"
        raise ConfigParseError(msg)

    raw_groups = data.get("answer_groups")
    if raw_groups is None:
        msg = "missing required field 'answer_groups'"
        raise ConfigParseError(msg)
    if not isinstance(raw_groups, list):
        msg = f"'answer_groups' must be a list, got {type(raw_groups).__name__}"
        raise ConfigParseError(msg)

    return InteractionSpec(
        interaction_kind=kind,
        answer_groups=tuple(parse_answer_group(g) for g in raw_groups),
        default_outcome=data.get("default_outcome"),
    )


def load_interaction_specs(path: str | Path) -> list[InteractionSpec[Any]]:
    """Load every interaction document from a (multi-document) YAML file."""
    specs: list[InteractionSpec[Any]] = []
    with Path(path).open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            specs.append(parse_interaction_spec(doc))
    return specs
