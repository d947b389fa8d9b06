"""answer_classify: rule-based classification of learner answers.

All public types are exported from this module for flat imports:

    from answer_classify import ClassificationEngine, Fraction, RuleSpec, default_engine
"""

__version__ = "0.1.0"

# Classifier and matcher shapes
from answer_classify._classifier import (
    Classifier,
    ClassifierFactory,
    DoubleInputMatcher,
    Matcher,
    NoInputMatcher,
    ParamSpec,
    SingleInputMatcher,
)

# Config parsing, see answer_classify._config for the document shapes
from answer_classify._config import (
    ConfigParseError,
    load_interaction_specs,
    parse_answer_group,
    parse_fraction,
    parse_interaction_spec,
    parse_ratio,
    parse_rule_spec,
    parse_typed_value,
)

# Engine
from answer_classify._engine import (
    AnswerGroup,
    ClassificationEngine,
    InteractionSpec,
    RuleSpec,
)

# Errors
from answer_classify._errors import (
    ClassificationError,
    DuplicateRegistrationError,
    InvalidClassifierError,
    InvalidFractionError,
    InvalidValueError,
    MissingParameterError,
    TypeMismatchError,
    UnknownRuleError,
    UnsupportedVariantError,
)

# Registry, see answer_classify._registry for details
from answer_classify._registry import Registry, RegistryBuilder, RegistryKey
from answer_classify._result import Err, Ok, Result

# Typed values
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
    tag_of,
    to_comparable,
)
from answer_classify.interactions import default_engine, default_registry, register_all

__all__ = [
    # Typed values
    "ValueTag",
    "TypedValue",
    "Fraction",
    "Number",
    "Integer",
    "NonNegativeInt",
    "Text",
    "TextList",
    "Ratio",
    "Boolean",
    "tag_of",
    "to_comparable",
    # Results
    "Ok",
    "Err",
    "Result",
    # Classifier
    "Matcher",
    "NoInputMatcher",
    "SingleInputMatcher",
    "DoubleInputMatcher",
    "ParamSpec",
    "Classifier",
    "ClassifierFactory",
    # Registry
    "RegistryKey",
    "RegistryBuilder",
    "Registry",
    # Engine
    "RuleSpec",
    "AnswerGroup",
    "InteractionSpec",
    "ClassificationEngine",
    "register_all",
    "default_registry",
    "default_engine",
    # Config
    "ConfigParseError",
    "parse_typed_value",
    "parse_fraction",
    "parse_ratio",
    "parse_rule_spec",
    "parse_answer_group",
    "parse_interaction_spec",
    "load_interaction_specs",
    # Errors
    "ClassificationError",
    "DuplicateRegistrationError",
    "InvalidClassifierError",
    "InvalidValueError",
    "InvalidFractionError",
    "UnknownRuleError",
    "MissingParameterError",
    "TypeMismatchError",
    "UnsupportedVariantError",
]
