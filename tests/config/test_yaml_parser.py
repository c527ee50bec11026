"""
Unit tests for ConfigurationYAMLParser.
"""

import pytest

from propcheck.config.schema import RunnerConfig
from propcheck.config.yaml_parser import ConfigurationYAMLParser, YAMLParsingError


@pytest.fixture
def parser():
    return ConfigurationYAMLParser()


def test_parse_string(parser):
    assert parser.parse_string("iterations: 10\nmock:\n  failure_trigger: 3\n") == {
        "iterations": 10,
        "mock": {"failure_trigger": 3},
    }


def test_empty_document(parser):
    assert parser.parse_string("") == {}


def test_syntax_error_has_line_number(parser):
    with pytest.raises(YAMLParsingError) as exc_info:
        parser.parse_string("iterations: 10\nmock: [unclosed\n")

    assert exc_info.value.line_number is not None
    assert "Line" in str(exc_info.value)


def test_root_must_be_mapping(parser):
    with pytest.raises(YAMLParsingError, match="mapping"):
        parser.parse_string("- 1\n- 2\n")


def test_missing_file(parser, tmp_path):
    with pytest.raises(YAMLParsingError) as exc_info:
        parser.parse_file(tmp_path / "nope.yaml")

    assert exc_info.value.file_path == tmp_path / "nope.yaml"


@pytest.mark.parametrize("config_dict,expected", [
    ({"iterations": "many"}, "iterations must be an integer"),
    ({"workers": True}, "workers must be an integer"),
    ({"seed": 1.5}, "seed must be an integer"),
    ({"colour": "blue"}, "Unknown configuration keys: colour"),
    ({"generator": 3}, "generator must be a dictionary"),
    ({"generator": {"max_len": 3}}, "Unknown generator keys: max_len"),
    ({"mock": {"failure_rule": "sometimes"}}, "mock.failure_rule must be a boolean"),
    ({"mock": {"failure_trigger": "666"}}, "mock.failure_trigger must be an integer"),
    ({"generator": {"max_number": "all"}}, "generator.max_number must be an integer"),
    ({"generator": {"max_text_length": "lots"}}, "generator.max_text_length must be an integer"),
    ({"generator": {"null_text_ratio": "often"}}, "generator.null_text_ratio must be a number"),
    ({"quiet_on_success": "yes"}, "quiet_on_success must be a boolean"),
    ({"mock": {"response": 42}}, "mock.response must be a string"),
])
def test_structure_errors(parser, config_dict, expected):
    assert expected in parser.validate_configuration_structure(config_dict)


def test_valid_structure(parser):
    config_dict = {
        "iterations": 5,
        "seed": None,
        "generator": {"max_number": 10},
        "mock": {"response": "ok", "failure_rule": True, "failure_trigger": 1},
    }

    assert parser.validate_configuration_structure(config_dict) == []


def test_serialize_round_trip(parser):
    text = parser.serialize_to_yaml(RunnerConfig(seed=42))

    parsed = parser.parse_string(text)

    assert parsed["seed"] == 42
    assert parsed["mock"]["response"] == "Working!"
    assert parser.validate_configuration_structure(parsed) == []


def test_placeholders_accepted_for_typed_values(parser):
    config_dict = {
        "iterations": "${ITERATIONS:-5}",
        "generator": {"null_text_ratio": "${RATIO}"},
        "mock": {"failure_rule": "${RULE:-false}"},
    }

    assert parser.validate_configuration_structure(config_dict) == []


def test_coerce_substituted_values(parser):
    coerced = parser.coerce_substituted_values({
        "iterations": "5",
        "seed": None,
        "log_file": "run.log",
        "generator": {"max_number": "10", "null_text_ratio": "0.5"},
        "mock": {"failure_rule": "true", "response": "7"},
    })

    assert coerced == {
        "iterations": 5,
        "seed": None,
        "log_file": "run.log",
        "generator": {"max_number": 10, "null_text_ratio": 0.5},
        "mock": {"failure_rule": True, "response": "7"},
    }


def test_coerce_rejects_unconvertible_value(parser):
    with pytest.raises(ValueError, match="generator.max_text_length"):
        parser.coerce_substituted_values({"generator": {"max_text_length": "lots"}})
