"""Shared fixtures and the conformance fixture loader.

Loads YAML fixtures from tests/fixtures/. Each document is an interaction
config (the same shape parse_interaction_spec() accepts) plus a list of
answers and the outcome each one must produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from answer_classify import (
    ClassificationEngine,
    InteractionSpec,
    Registry,
    RegistryBuilder,
    TypedValue,
    default_engine,
    parse_interaction_spec,
    parse_typed_value,
    register_all,
)
from answer_classify.testing import register

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single answer from a conformance fixture."""

    fixture_name: str
    case_name: str
    spec: InteractionSpec[Any]
    answer: TypedValue
    expect: Any


def load_fixtures() -> list[FixtureCase]:
    """Load every conformance case under tests/fixtures/."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            spec = parse_interaction_spec(doc["config"])
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        spec=spec,
                        answer=parse_typed_value(case["answer"]),
                        expect=case["expect"],
                    )
                )
    return cases


@pytest.fixture
def registry() -> Registry:
    """Built-in interactions plus the test interaction."""
    builder = RegistryBuilder()
    register_all(builder)
    register(builder)
    return builder.build()


@pytest.fixture
def engine(registry: Registry) -> ClassificationEngine:
    return ClassificationEngine(registry)


@pytest.fixture
def builtin_engine() -> ClassificationEngine:
    return default_engine()
