"""
Unit tests for ConfigurationManager.

Tests configuration loading, layering precedence, environment variable
substitution and template generation.
"""

from dataclasses import asdict
from pathlib import Path

import pytest
import yaml

from propcheck.config.manager import ConfigurationManager
from propcheck.config.schema import DEFAULT_ITERATIONS, DEFAULT_TABLE_SIZE, RunnerConfig
from propcheck.errors import ConfigurationError


def write_yaml(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def manager(tmp_path):
    return ConfigurationManager(
        user_config_path=tmp_path / "user" / "config.yaml",
        project_config_path=tmp_path / "project" / "config.yaml",
    )


class TestLoadConfiguration:
    """Test loading and layering."""

    def test_defaults(self, manager):
        config = manager.load_configuration()

        assert config.iterations == DEFAULT_ITERATIONS
        assert config.table_size == DEFAULT_TABLE_SIZE
        assert config.seed is None
        assert config.workers == 1
        assert config.log_level == "warning"
        assert config.mock.response == "Working!"
        assert config.mock.failure_rule is False
        assert config.mock.failure_trigger == 666
        assert config.generator.max_number == 1024

    def test_explicit_file(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "iterations: 50\nseed: 7\n")

        config = manager.load_configuration(config_file=str(path))

        assert config.iterations == 50
        assert config.seed == 7

    def test_nested_sections_merge_with_defaults(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "mock:\n  failure_rule: true\n")

        config = manager.load_configuration(config_file=str(path))

        assert config.mock.failure_rule is True
        assert config.mock.response == "Working!"

    def test_precedence_user_project_explicit(self, manager, tmp_path):
        write_yaml(manager.user_config_path, "iterations: 1\ntable_size: 1\nworkers: 1\n")
        write_yaml(manager.project_config_path, "iterations: 2\ntable_size: 2\n")
        explicit = write_yaml(tmp_path / "run.yaml", "iterations: 3\n")

        config = manager.load_configuration(config_file=str(explicit))

        assert config.iterations == 3
        assert config.table_size == 2
        assert config.workers == 1

    def test_environment_overrides_files(self, manager, tmp_path, monkeypatch):
        path = write_yaml(tmp_path / "run.yaml", "iterations: 3\n")
        monkeypatch.setenv("PROPCHECK_ITERATIONS", "4")
        monkeypatch.setenv("PROPCHECK_FAILURE_RULE", "yes")

        config = manager.load_configuration(config_file=str(path))

        assert config.iterations == 4
        assert config.mock.failure_rule is True

    def test_cli_overrides_environment(self, manager, monkeypatch):
        monkeypatch.setenv("PROPCHECK_ITERATIONS", "4")

        config = manager.load_configuration(cli_overrides={"iterations": 5})

        assert config.iterations == 5

    def test_none_overrides_are_ignored(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "seed: 9\nmock:\n  failure_rule: true\n")

        config = manager.load_configuration(
            config_file=str(path),
            cli_overrides={"seed": None, "mock": {"failure_rule": None}},
        )

        assert config.seed == 9
        assert config.mock.failure_rule is True

    def test_false_override_is_applied(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "mock:\n  failure_rule: true\n")

        config = manager.load_configuration(
            config_file=str(path), cli_overrides={"mock": {"failure_rule": False}}
        )

        assert config.mock.failure_rule is False

    def test_missing_explicit_file(self, manager, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            manager.load_configuration(config_file=str(tmp_path / "missing.yaml"))

    def test_unknown_keys_rejected(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "iterations: 3\nshrink: true\n")

        with pytest.raises(ConfigurationError, match="shrink"):
            manager.load_configuration(config_file=str(path))

    def test_invalid_values_rejected(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "table_size: 5000\nworkers: 0\n")

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_configuration(config_file=str(path))

        message = str(exc_info.value)
        assert "table_size" in message
        assert "workers" in message

    def test_generator_value_of_wrong_type(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "generator:\n  max_text_length: lots\n")

        with pytest.raises(ConfigurationError, match="generator.max_text_length"):
            manager.load_configuration(config_file=str(path))

    def test_generator_value_out_of_range(self, manager, tmp_path):
        path = write_yaml(tmp_path / "run.yaml", "generator:\n  max_number: 5000\n")

        with pytest.raises(ConfigurationError, match="max_number"):
            manager.load_configuration(config_file=str(path))

    def test_override_of_wrong_type(self, manager):
        with pytest.raises(ConfigurationError):
            manager.load_configuration(cli_overrides={"iterations": [1, 2]})

    def test_bad_environment_value(self, manager, monkeypatch):
        monkeypatch.setenv("PROPCHECK_SEED", "abc")

        with pytest.raises(ConfigurationError, match="PROPCHECK_SEED"):
            manager.load_configuration()


class TestEnvironmentSubstitution:
    """Test ${VAR} substitution."""

    def test_substitutes_set_variable(self, manager, tmp_path, monkeypatch):
        monkeypatch.setenv("MOCK_RESPONSE", "All good")
        path = write_yaml(tmp_path / "run.yaml", 'mock:\n  response: "${MOCK_RESPONSE}"\n')

        config = manager.load_configuration(config_file=str(path))

        assert config.mock.response == "All good"

    def test_default_value(self, manager, tmp_path):
        path = write_yaml(
            tmp_path / "run.yaml", 'mock:\n  response: "${UNSET_RESPONSE_VAR:-Fallback}"\n'
        )

        config = manager.load_configuration(config_file=str(path))

        assert config.mock.response == "Fallback"

    def test_numeric_values_converted(self, manager, tmp_path, monkeypatch):
        monkeypatch.setenv("PROPCHECK_TEST_ITERATIONS", "42")
        path = write_yaml(
            tmp_path / "run.yaml",
            "iterations: \"${PROPCHECK_TEST_ITERATIONS}\"\n"
            "table_size: \"${UNSET_TABLE_SIZE_VAR:-5}\"\n"
            "mock:\n  failure_rule: \"${UNSET_RULE_VAR:-true}\"\n",
        )

        config = manager.load_configuration(config_file=str(path))

        assert config.iterations == 42
        assert config.table_size == 5
        assert config.mock.failure_rule is True

    def test_unconvertible_substitution(self, manager, tmp_path, monkeypatch):
        monkeypatch.setenv("PROPCHECK_TEST_ITERATIONS", "many")
        path = write_yaml(tmp_path / "run.yaml", "iterations: \"${PROPCHECK_TEST_ITERATIONS}\"\n")

        with pytest.raises(ConfigurationError, match="iterations"):
            manager.load_configuration(config_file=str(path))

    def test_missing_required_variable(self, manager):
        with pytest.raises(ConfigurationError, match="UNSET_RESPONSE_VAR"):
            manager.substitute_environment_variables({"log_file": "${UNSET_RESPONSE_VAR}"})

    def test_non_strings_untouched(self, manager):
        data = {"iterations": 3, "mock": {"failure_rule": True}}

        assert manager.substitute_environment_variables(data) == data


class TestTemplate:
    """Test configuration template generation."""

    def test_template_parses_to_defaults(self, manager):
        parsed = yaml.safe_load(manager.generate_default_config())

        assert parsed == asdict(RunnerConfig())

    def test_save_and_reload(self, manager, tmp_path):
        config = RunnerConfig(iterations=12, seed=3)
        config.mock.response = 'say "hi"'
        path = tmp_path / "saved" / "config.yaml"

        manager.save_configuration(config, str(path))
        loaded = manager.load_configuration(config_file=str(path))

        assert loaded == config
