"""Explicit success / failure values returned by evaluation.

A Result is exactly one of Ok or Err (never both) and is
pattern-matchable::

    match engine.classify("FractionInput", spec, answer):
        case Ok(value=matched):
            ...
        case Err(error=e):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from answer_classify._errors import ClassificationError


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful evaluation carrying its value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed evaluation carrying the classification error."""

    error: ClassificationError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


type Result[T] = Ok[T] | Err
