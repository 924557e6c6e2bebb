"""Tests for the default effect collaborators."""

import asyncio

import pytest

from flowtree import console_emit, unconfigured_call


class TestConsoleEmit:
    """Tests for console_emit."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("hello", "hello\n"),
            (False, "false\n"),
            (2.0, "2\n"),
            ("[bold]not markup[/bold] :smile:", "[bold]not markup[/bold] :smile:\n"),
            ({"status": 200}, "{'status': 200}\n"),
        ],
    )
    def test_prints_rendered_value(self, value: object, expected: str, capsys: pytest.CaptureFixture[str]) -> None:
        """Should print the rendered value without markup or emoji substitution."""
        console_emit(value)
        assert capsys.readouterr().out == expected


class TestUnconfiguredCall:
    """Tests for unconfigured_call."""

    def test_always_fails(self) -> None:
        """Should raise for any config."""
        with pytest.raises(RuntimeError, match="No API call handler"):
            asyncio.run(unconfigured_call({"url": "https://example.com"}))
