"""Interpreter settings, optionally loaded from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ._values import Value  # noqa: TC001 - Pydantic requires Value at runtime for field validation


class ConfigError(Exception):
    """Error in flowtree configuration."""


class InterpreterSettings(BaseModel):
    """Tunable interpreter behavior.

    Attributes:
        empty_block_value: Value of a block that contains no expressions.
        log_api_responses: Log the raw response of every API call at DEBUG level.

    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True, allow_inf_nan=False)

    empty_block_value: Value = True
    log_api_responses: bool = False


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_settings(pyproject_path: Path) -> InterpreterSettings:
    """Load and validate the [tool.flowtree] table of a pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed InterpreterSettings. Defaults if the table is absent.

    Raises:
        ConfigError: If the file is not valid TOML or the table is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("flowtree", {})
    if not isinstance(section, dict):
        msg = f"Invalid [tool.flowtree] in {pyproject_path}: expected a table"
        raise ConfigError(msg)

    try:
        return InterpreterSettings.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.flowtree] in {pyproject_path}:\n{e}"
        raise ConfigError(msg) from e


def get_settings(start_dir: Path | None = None) -> InterpreterSettings:
    """Get settings from pyproject.toml in start_dir or its parents.

    Returns:
        InterpreterSettings (defaults if no pyproject.toml or no [tool.flowtree] table)

    """
    pyproject_path = find_pyproject_toml(start_dir)
    if pyproject_path is None:
        return InterpreterSettings()
    return load_settings(pyproject_path)
