"""Classifier: a matcher plus the metadata needed to call it generically.

A matcher is a plain pure function over TypedValues returning bool. It is
the only per-rule code; everything else a rule needs (parameter lookup,
variant checks, error reporting) lives in Classifier.evaluate() and is
shared by every rule:

1. every expected parameter must be present   -> MissingParameterError
2. answer and parameters must carry the tags  -> TypeMismatchError
3. call the matcher                           -> Ok(bool)

Classifiers are frozen and hold no mutable state, so one instance is
shared by all concurrent evaluations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from answer_classify._errors import (
    ClassificationError,
    InvalidClassifierError,
    MissingParameterError,
    TypeMismatchError,
)
from answer_classify._result import Err, Ok, Result
from answer_classify._values import ValueTag, tag_of, type_name

# Matcher signatures by arity. Arguments are already tag-checked when called.
type NoInputMatcher = Callable[[Any], bool]
type SingleInputMatcher = Callable[[Any, Any], bool]
type DoubleInputMatcher = Callable[[Any, Any, Any], bool]
type Matcher = Callable[..., bool]


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """A named rule input and the variant it must carry."""

    name: str
    tag: ValueTag


@dataclass(frozen=True, slots=True)
class Classifier:
    """Binds an answer tag, ordered parameter specs and a matcher.

    The matcher is called as ``matcher(answer, *inputs)`` with inputs in
    ``params`` order.

    Raises:
        InvalidClassifierError: a parameter name is empty or repeated.
    """

    answer_tag: ValueTag
    params: tuple[ParamSpec, ...]
    matcher: Matcher

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for spec in self.params:
            if not isinstance(spec.name, str) or not spec.name:
                msg = "classifier parameter names must be non-empty strings"
                raise InvalidClassifierError(msg)
            if spec.name in seen:
                msg = f"classifier parameter {spec.name!r} is declared twice"
                raise InvalidClassifierError(msg)
            seen.add(spec.name)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.params)

    def evaluate(self, answer: Any, params: Mapping[str, Any]) -> Result[bool]:
        """Check the inputs, then run the matcher.

        Parameters not declared by this classifier are ignored. A
        ClassificationError raised by the matcher (e.g. from
        to_comparable) is returned as Err rather than propagated.
        """
        for spec in self.params:
            if spec.name not in params:
                return Err(MissingParameterError(spec.name, list(params)))

        if tag_of(answer) is not self.answer_tag:
            return Err(TypeMismatchError(self.answer_tag, type_name(answer)))

        inputs = []
        for spec in self.params:
            value = params[spec.name]
            if tag_of(value) is not spec.tag:
                return Err(TypeMismatchError(spec.tag, type_name(value), spec.name))
            inputs.append(value)

        try:
            matched = self.matcher(answer, *inputs)
        except ClassificationError as e:
            return Err(e)
        return Ok(bool(matched))


class ClassifierFactory:
    """Builds Classifiers for the common matcher shapes.

    Matcher purity is the caller's contract; it is not checked here.
    """

    @staticmethod
    def create(
        expected_tag: ValueTag,
        expected_param_name: str,
        matcher: SingleInputMatcher,
    ) -> Classifier:
        """Single input whose variant matches the answer's."""
        return Classifier(
            answer_tag=expected_tag,
            params=(ParamSpec(expected_param_name, expected_tag),),
            matcher=matcher,
        )

    @staticmethod
    def create_multi_type(
        answer_tag: ValueTag,
        param_name: str,
        param_tag: ValueTag,
        matcher: SingleInputMatcher,
    ) -> Classifier:
        """Single input of a different variant than the answer."""
        return Classifier(
            answer_tag=answer_tag,
            params=(ParamSpec(param_name, param_tag),),
            matcher=matcher,
        )

    @staticmethod
    def create_no_input(expected_tag: ValueTag, matcher: NoInputMatcher) -> Classifier:
        return Classifier(answer_tag=expected_tag, params=(), matcher=matcher)

    @staticmethod
    def create_double_input(
        expected_tag: ValueTag,
        first_param_name: str,
        second_param_name: str,
        matcher: DoubleInputMatcher,
    ) -> Classifier:
        """Two inputs, both of the answer's variant."""
        return Classifier(
            answer_tag=expected_tag,
            params=(
                ParamSpec(first_param_name, expected_tag),
                ParamSpec(second_param_name, expected_tag),
            ),
            matcher=matcher,
        )
