"""Typed values: the closed set of answer and rule-parameter shapes.

Every learner answer and every rule input reaching the engine is one of
the variants below. Variants are frozen dataclasses that validate their
invariants at construction, so an invalid value (e.g. a zero denominator)
never reaches a matcher.

``to_comparable`` is the single place that projects a value onto an
ordered numeric form. It matches exhaustively over the variants; adding a
variant means adding a case there.

Precision contract: the comparable form is an exact ``fractions.Fraction``.
Fraction answers are never routed through floating point, so ordering and
equality hold for arbitrarily large numerators and denominators. A Number
projects its IEEE-754 double exactly.
"""

from __future__ import annotations

import enum
import fractions
import math
from dataclasses import dataclass
from typing import Any, ClassVar

from answer_classify._errors import (
    InvalidFractionError,
    InvalidValueError,
    UnsupportedVariantError,
)


class ValueTag(enum.Enum):
    """Discriminant of a TypedValue."""

    FRACTION = "Fraction"
    NUMBER = "Number"
    INTEGER = "Integer"
    NON_NEGATIVE_INT = "NonNegativeInt"
    TEXT = "Text"
    TEXT_LIST = "TextList"
    RATIO = "Ratio"
    BOOLEAN = "Boolean"


def _is_int(value: Any) -> bool:
    # bool is an int subclass; a True answer is never a count.
    return isinstance(value, int) and not isinstance(value, bool)


# ═══════════════════════════════════════════════════════════════════════════════
# Variants
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Fraction:
    """A signed mixed number: ``sign * (whole_number + numerator/denominator)``.

    Components are stored as entered, so 1/2 and 2/4 are different values
    with the same comparable form.

    Raises:
        InvalidFractionError: zero denominator, or a negative / non-int part.
    """

    tag: ClassVar[ValueTag] = ValueTag.FRACTION

    is_negative: bool = False
    whole_number: int = 0
    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.is_negative, bool):
            raise InvalidFractionError("is_negative must be a bool")
        for name in ("whole_number", "numerator", "denominator"):
            part = getattr(self, name)
            if not _is_int(part):
                raise InvalidFractionError(f"{name} must be an int, got {part!r}")
            if part < 0:
                raise InvalidFractionError(f"{name} must be non-negative, got {part}")
        if self.denominator == 0:
            raise InvalidFractionError("denominator must be non-zero")

    @property
    def sign(self) -> int:
        return -1 if self.is_negative else 1

    @property
    def integer_part(self) -> int:
        """The signed whole-number part, ignoring any improper numerator."""
        return self.sign * self.whole_number

    def to_rational(self) -> fractions.Fraction:
        return self.sign * (
            self.whole_number + fractions.Fraction(self.numerator, self.denominator)
        )

    def to_float(self) -> float:
        """Approximate value, for display only."""
        return float(self.to_rational())

    def to_simplest_form(self) -> Fraction:
        """Reduce numerator and denominator by their gcd.

        The sign and whole number are kept; an improper fractional part
        stays improper.
        """
        divisor = math.gcd(self.numerator, self.denominator)
        return Fraction(
            is_negative=self.is_negative,
            whole_number=self.whole_number,
            numerator=self.numerator // divisor,
            denominator=self.denominator // divisor,
        )

    def to_improper_form(self) -> Fraction:
        return Fraction(
            is_negative=self.is_negative,
            whole_number=0,
            numerator=self.whole_number * self.denominator + self.numerator,
            denominator=self.denominator,
        )

    def __str__(self) -> str:
        sign = "-" if self.is_negative else ""
        if self.numerator == 0:
            return f"{sign}{self.whole_number}"
        if self.whole_number == 0:
            return f"{sign}{self.numerator}/{self.denominator}"
        return f"{sign}{self.whole_number} {self.numerator}/{self.denominator}"


@dataclass(frozen=True, slots=True)
class Number:
    """A finite real number. Ints are accepted and stored as float.

    Raises:
        InvalidValueError: non-finite, or an int with no exact float form.
    """

    tag: ClassVar[ValueTag] = ValueTag.NUMBER

    value: float

    def __post_init__(self) -> None:
        if not (_is_int(self.value) or isinstance(self.value, float)):
            msg = f"Number requires an int or float, got {type(self.value).__name__}"
            raise InvalidValueError(msg)
        try:
            as_float = float(self.value)
        except OverflowError:
            msg = "Number int is too large for a float"
            raise InvalidValueError(msg) from None
        if not math.isfinite(as_float):
            msg = f"Number must be finite, got {self.value!r}"
            raise InvalidValueError(msg)
        # int == float compares exactly; a mismatch means float() rounded.
        if as_float != self.value:
            msg = f"Number int {self.value} has no exact float representation"
            raise InvalidValueError(msg)
        object.__setattr__(self, "value", as_float)


@dataclass(frozen=True, slots=True)
class Integer:
    """A signed integer."""

    tag: ClassVar[ValueTag] = ValueTag.INTEGER

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            msg = f"Integer requires an int, got {type(self.value).__name__}"
            raise InvalidValueError(msg)


@dataclass(frozen=True, slots=True)
class NonNegativeInt:
    """A count or a choice index."""

    tag: ClassVar[ValueTag] = ValueTag.NON_NEGATIVE_INT

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            msg = f"NonNegativeInt requires an int, got {type(self.value).__name__}"
            raise InvalidValueError(msg)
        if self.value < 0:
            msg = f"NonNegativeInt must be >= 0, got {self.value}"
            raise InvalidValueError(msg)


@dataclass(frozen=True, slots=True)
class Text:
    tag: ClassVar[ValueTag] = ValueTag.TEXT

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = f"Text requires a str, got {type(self.value).__name__}"
            raise InvalidValueError(msg)


@dataclass(frozen=True, slots=True)
class TextList:
    """An ordered list of strings (e.g. selected item ids).

    Lists are frozen to a tuple at construction.
    """

    tag: ClassVar[ValueTag] = ValueTag.TEXT_LIST

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.values, str) or not isinstance(self.values, (list, tuple)):
            msg = f"TextList requires a list of str, got {type(self.values).__name__}"
            raise InvalidValueError(msg)
        for item in self.values:
            if not isinstance(item, str):
                msg = f"TextList items must be str, got {type(item).__name__}"
                raise InvalidValueError(msg)
        object.__setattr__(self, "values", tuple(self.values))

    def as_set(self) -> frozenset[str]:
        return frozenset(self.values)


@dataclass(frozen=True, slots=True)
class Ratio:
    """A ratio expression such as 1:2:3 (two or more positive terms)."""

    tag: ClassVar[ValueTag] = ValueTag.RATIO

    terms: tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.terms, (list, tuple)):
            msg = f"Ratio requires a list of int, got {type(self.terms).__name__}"
            raise InvalidValueError(msg)
        if len(self.terms) < 2:
            msg = f"Ratio needs at least 2 terms, got {len(self.terms)}"
            raise InvalidValueError(msg)
        for term in self.terms:
            if not _is_int(term) or term <= 0:
                msg = f"Ratio terms must be positive ints, got {term!r}"
                raise InvalidValueError(msg)
        object.__setattr__(self, "terms", tuple(self.terms))

    def to_simplest_form(self) -> Ratio:
        divisor = math.gcd(*self.terms)
        return Ratio(tuple(term // divisor for term in self.terms))

    def __str__(self) -> str:
        return ":".join(str(term) for term in self.terms)


@dataclass(frozen=True, slots=True)
class Boolean:
    tag: ClassVar[ValueTag] = ValueTag.BOOLEAN

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            msg = f"Boolean requires a bool, got {type(self.value).__name__}"
            raise InvalidValueError(msg)


# The closed union. Pattern-match on the concrete classes.
type TypedValue = (
    Fraction | Number | Integer | NonNegativeInt | Text | TextList | Ratio | Boolean
)

_VARIANTS = (Fraction, Number, Integer, NonNegativeInt, Text, TextList, Ratio, Boolean)


def tag_of(value: object) -> ValueTag | None:
    """Return the tag of a TypedValue, or None for anything else."""
    if isinstance(value, _VARIANTS):
        return value.tag
    return None


def type_name(value: object) -> str:
    """Readable type name for error messages."""
    tag = tag_of(value)
    return tag.value if tag is not None else type(value).__name__


# ═══════════════════════════════════════════════════════════════════════════════
# Comparable form
# ═══════════════════════════════════════════════════════════════════════════════


def to_comparable(value: TypedValue) -> fractions.Fraction:
    """Project an ordered variant onto an exact rational.

    Raises:
        UnsupportedVariantError: the variant has no numeric ordering.
    """
    match value:
        case Fraction():
            return value.to_rational()
        case Number(value=v):
            return fractions.Fraction(v)
        case Integer(value=v) | NonNegativeInt(value=v):
            return fractions.Fraction(v)
        case Text() | TextList() | Ratio() | Boolean():
            raise UnsupportedVariantError(value.tag.value)
    raise UnsupportedVariantError(type_name(value))
