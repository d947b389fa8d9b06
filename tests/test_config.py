"""Tests for config parsing (answer_classify._config)."""

from __future__ import annotations

from pathlib import Path

import pytest

from answer_classify import (
    AnswerGroup,
    Boolean,
    ConfigParseError,
    Fraction,
    Integer,
    InvalidFractionError,
    NonNegativeInt,
    Number,
    Ratio,
    Text,
    TextList,
    load_interaction_specs,
    parse_answer_group,
    parse_fraction,
    parse_interaction_spec,
    parse_ratio,
    parse_rule_spec,
    parse_typed_value,
)


class TestParseFraction:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1/2", Fraction(False, 0, 1, 2)),
            ("-3/4", Fraction(True, 0, 3, 4)),
            ("1 3/4", Fraction(False, 1, 3, 4)),
            ("-1 1/2", Fraction(True, 1, 1, 2)),
            ("  5 ", Fraction(False, 5, 0, 1)),
            ("7/3", Fraction(False, 0, 7, 3)),
            ("2 / 5", Fraction(False, 0, 2, 5)),
        ],
    )
    def test_valid(self, text: str, expected: Fraction) -> None:
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1/", "/2", "1.5", "1 2", "1/2/3", "--1"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ConfigParseError, match="not a fraction"):
            parse_fraction(text)

    def test_no_space_is_not_mixed(self) -> None:
        assert parse_fraction("34/5") == Fraction(False, 0, 34, 5)

    def test_zero_denominator(self) -> None:
        with pytest.raises(InvalidFractionError):
            parse_fraction("1/0")


class TestParseRatio:
    def test_valid(self) -> None:
        assert parse_ratio("1:2:3") == Ratio((1, 2, 3))
        assert parse_ratio(" 4 : 6 ") == Ratio((4, 6))

    @pytest.mark.parametrize("text", ["1", "1:", "a:b", "1:-2"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ConfigParseError, match="not a ratio"):
            parse_ratio(text)


class TestParseTypedValue:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (
                {"Fraction": {"is_negative": True, "whole_number": 1, "numerator": 1, "denominator": 2}},
                Fraction(True, 1, 1, 2),
            ),
            ({"Fraction": "2/4"}, Fraction(False, 0, 2, 4)),
            ({"Fraction": {"numerator": 1, "denominator": 3}}, Fraction(False, 0, 1, 3)),
            ({"Number": 2.5}, Number(2.5)),
            ({"Number": 2}, Number(2.0)),
            ({"Integer": -4}, Integer(-4)),
            ({"NonNegativeInt": 0}, NonNegativeInt(0)),
            ({"Text": "hello"}, Text("hello")),
            ({"TextList": ["a", "b"]}, TextList(("a", "b"))),
            ({"Ratio": [2, 3]}, Ratio((2, 3))),
            ({"Ratio": "2:3"}, Ratio((2, 3))),
            ({"Boolean": False}, Boolean(False)),
        ],
    )
    def test_variants(self, data: dict, expected: object) -> None:
        assert parse_typed_value(data) == expected

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a dict"):
            parse_typed_value("1/2")  # type: ignore[arg-type]

    def test_multiple_keys(self) -> None:
        with pytest.raises(ConfigParseError, match="exactly one"):
            parse_typed_value({"Number": 1, "Integer": 1})

    def test_unknown_variant(self) -> None:
        with pytest.raises(ConfigParseError, match="unknown typed value variant 'Complex'"):
            parse_typed_value({"Complex": [1, 2]})

    def test_unknown_fraction_field(self) -> None:
        with pytest.raises(ConfigParseError, match="unknown Fraction fields"):
            parse_typed_value({"Fraction": {"numerator": 1, "denom": 2}})

    def test_zero_denominator_chained(self) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            parse_typed_value({"Fraction": {"numerator": 1, "denominator": 0}})
        assert isinstance(exc_info.value.__cause__, InvalidFractionError)

    def test_wrong_payload_type(self) -> None:
        with pytest.raises(ConfigParseError, match="requires an int"):
            parse_typed_value({"Integer": "3"})

    def test_huge_number_is_config_parse_error(self) -> None:
        with pytest.raises(ConfigParseError, match="too large"):
            parse_typed_value({"Number": 10**400})

    def test_fraction_payload_type(self) -> None:
        with pytest.raises(ConfigParseError, match="string or a dict"):
            parse_typed_value({"Fraction": 0.5})


class TestParseRuleSpec:
    def test_rule_with_inputs(self) -> None:
        spec = parse_rule_spec(
            {"rule_type": "IsLessThan", "inputs": {"f": {"Fraction": "3/4"}}}
        )
        assert spec.rule_type == "IsLessThan"
        assert dict(spec.inputs) == {"f": Fraction(False, 0, 3, 4)}

    def test_rule_without_inputs(self) -> None:
        spec = parse_rule_spec({"rule_type": "HasNoFractionalPart"})
        assert dict(spec.inputs) == {}

    def test_missing_rule_type(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'rule_type'"):
            parse_rule_spec({"inputs": {}})

    def test_empty_rule_type(self) -> None:
        with pytest.raises(ConfigParseError, match="non-empty string"):
            parse_rule_spec({"rule_type": ""})

    def test_inputs_not_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="'inputs' must be a dict"):
            parse_rule_spec({"rule_type": "Equals", "inputs": ["x"]})


class TestParseInteractionSpec:
    def test_full_document(self) -> None:
        spec = parse_interaction_spec(
            {
                "interaction": "FractionInput",
                "answer_groups": [
                    {
                        "outcome": "correct",
                        "rules": [
                            {"rule_type": "IsEquivalentTo", "inputs": {"f": {"Fraction": "1/2"}}}
                        ],
                    }
                ],
                "default_outcome": "wrong",
            }
        )
        assert spec.interaction_kind == "FractionInput"
        assert spec.default_outcome == "wrong"
        assert len(spec.answer_groups) == 1
        assert spec.answer_groups[0].outcome == "correct"

    def test_default_outcome_optional(self) -> None:
        spec = parse_interaction_spec({"interaction": "TextInput", "answer_groups": []})
        assert spec.default_outcome is None
        assert spec.answer_groups == ()

    def test_missing_interaction(self) -> None:
        with pytest.raises(ConfigParseError, match="'interaction'"):
            parse_interaction_spec({"answer_groups": []})

    def test_missing_answer_groups(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'answer_groups'"):
            parse_interaction_spec({"interaction": "TextInput"})

    def test_group_missing_outcome(self) -> None:
        with pytest.raises(ConfigParseError, match="'outcome'"):
            parse_answer_group({"rules": []})

    def test_group_rules_not_list(self) -> None:
        with pytest.raises(ConfigParseError, match="'rules' must be a list"):
            parse_answer_group({"outcome": "x"})

    def test_group_outcome_may_be_any_value(self) -> None:
        group = parse_answer_group({"outcome": {"feedback": "Well done", "dest": 3}, "rules": []})
        assert group == AnswerGroup({"feedback": "Well done", "dest": 3}, ())


class TestLoadInteractionSpecs:
    def test_loads_multi_document_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(
            "interaction: TextInput\n"
            "answer_groups:\n"
            "  - outcome: greeting\n"
            "    rules:\n"
            "      - rule_type: Equals\n"
            "        inputs:\n"
            "          x: {Text: hi}\n"
            "---\n"
            "---\n"
            "interaction: NumericInput\n"
            "answer_groups: []\n"
            "default_outcome: nope\n"
        )
        specs = load_interaction_specs(path)
        assert [s.interaction_kind for s in specs] == ["TextInput", "NumericInput"]
        assert specs[1].default_outcome == "nope"

