"""Tests for the configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from flowtree import ConfigError, InterpreterSettings, find_pyproject_toml, get_settings, load_settings


class TestInterpreterSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        """Should default to a true empty-block value and no response logging."""
        settings = InterpreterSettings()
        assert settings.empty_block_value is True
        assert settings.log_api_responses is False

    def test_frozen(self) -> None:
        """Should reject assignment to a field."""
        settings = InterpreterSettings()
        with pytest.raises(ValidationError):
            settings.log_api_responses = True  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Should reject fields it does not define."""
        with pytest.raises(ValidationError):
            InterpreterSettings.model_validate({"unknown": 1})

    def test_rejects_non_value_marker(self) -> None:
        """Should reject an empty-block value that is not a workflow value."""
        with pytest.raises(ValidationError):
            InterpreterSettings.model_validate({"empty_block_value": [1]})


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "workflows" / "nested"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadSettings:
    """Tests for reading the [tool.flowtree] table."""

    def test_reads_table(self, tmp_path: Path) -> None:
        """Should read every setting from [tool.flowtree]."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.flowtree]
empty_block_value = "empty"
log_api_responses = true
""",
        )

        settings = load_settings(pyproject)

        assert settings == InterpreterSettings(empty_block_value="empty", log_api_responses=True)

    def test_missing_table_gives_defaults(self, tmp_path: Path) -> None:
        """Should return defaults when there is no [tool.flowtree] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert load_settings(pyproject) == InterpreterSettings()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise ConfigError for malformed TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.flowtree\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_settings(pyproject)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Should raise ConfigError for a setting of the wrong type."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.flowtree]\nlog_api_responses = 'yes'\n")

        with pytest.raises(ConfigError, match=r"Invalid \[tool.flowtree\]"):
            load_settings(pyproject)

    def test_table_must_be_a_table(self, tmp_path: Path) -> None:
        """Should raise ConfigError when tool.flowtree is not a table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool]\nflowtree = 3\n")

        with pytest.raises(ConfigError, match="expected a table"):
            load_settings(pyproject)


class TestGetSettings:
    """Tests for get_settings."""

    def test_uses_nearest_pyproject(self, tmp_path: Path) -> None:
        """Should load settings from the nearest pyproject.toml above the start directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.flowtree]\nempty_block_value = false\n")
        subdir = tmp_path / "pkg"
        subdir.mkdir()

        assert get_settings(subdir).empty_block_value is False
