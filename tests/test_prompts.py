"""Tests for create_effect_agent.prompts.RichPrompter."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from create_effect_agent.errors import ValidationError
from create_effect_agent.prompts import Choice, RichPrompter

OPTIONS = [Choice("One", 1), Choice("Two", 2), Choice("Three", 3)]


@pytest.fixture
def prompter() -> RichPrompter:
    return RichPrompter(Console(file=StringIO(), width=120))


class TestSelect:
    """Test RichPrompter.select()."""

    def test_maps_number_to_value(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value="2"):
            assert prompter.select("Pick:", OPTIONS) == 2


class TestMultiSelect:
    """Test RichPrompter.multi_select()."""

    def test_comma_separated(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value="3, 1,3"):
            assert prompter.multi_select("Pick:", OPTIONS) == [3, 1]

    def test_empty_is_none_selected(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value=""):
            assert prompter.multi_select("Pick:", OPTIONS) == []

    @pytest.mark.parametrize("answer", ["4", "0", "x", "1,,two"])
    def test_invalid_token(self, prompter, answer):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value=answer):
            with pytest.raises(ValidationError, match="Invalid selection"):
                prompter.multi_select("Pick:", OPTIONS)


class TestText:
    """Test RichPrompter.text()."""

    def test_strips_and_validates(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value="  demo  "):
            assert prompter.text("Name:", validate=lambda value: None) == "demo"

    def test_validator_problem_raised(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value="Bad"):
            with pytest.raises(ValidationError, match="lowercase"):
                prompter.text("Name:", validate=lambda value: "must be lowercase")

    def test_default_passed_through(self, prompter):
        with patch("create_effect_agent.prompts.Prompt.ask", return_value="x") as ask:
            prompter.text("Name:", default="my-effect-lib")
        assert ask.call_args.kwargs["default"] == "my-effect-lib"


class TestConfirm:
    """Test RichPrompter.confirm()."""

    def test_delegates_to_rich_confirm(self, prompter):
        with patch("create_effect_agent.prompts.Confirm.ask", return_value=True) as ask:
            assert prompter.confirm("Continue?") is True
        assert ask.call_args.kwargs["default"] is False
