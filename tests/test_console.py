"""Tests for the read-validate-retry prompts."""

import pytest

from chipstock.errors import InputClosed


class TestAskInt:

    def test_retries_until_integer(self, make_console):
        console, scripted, out = make_console(["abc", "", "4.5", " 42"])
        assert console.ask_int("N: ") == 42
        assert len(scripted.prompts) == 4
        assert out.getvalue().count("Invalid number") == 3

    def test_oversized_number_reprompts(self, make_console):
        console, scripted, out = make_console(["9" * 5000, "4"])
        assert console.ask_int("N: ") == 4
        assert len(scripted.prompts) == 2
        assert "Invalid number" in out.getvalue()

    def test_oversized_optional_number_reprompts(self, make_console):
        console, _, _ = make_console(["9" * 5000, ""])
        assert console.ask_optional_int("Qty [5]: ", 5) == 5

    def test_check_rejects(self, make_console):
        console, _, out = make_console(["-3", "3"])
        assert console.ask_int("N: ", check=lambda v: v >= 0, error="no negatives") == 3
        assert "no negatives" in out.getvalue()

    def test_end_of_input(self, make_console):
        console, _, _ = make_console([])
        with pytest.raises(InputClosed):
            console.ask_int("N: ")


class TestOptionalPrompts:

    def test_blank_keeps_current(self, make_console):
        console, _, _ = make_console(["", ""])
        assert console.ask_optional_int("Qty [5]: ", 5) == 5
        assert console.ask_optional_text("Name [Nacho]: ", "Nacho") == "Nacho"

    def test_value_replaces(self, make_console):
        console, _, _ = make_console(["x", "9", "Cheddar"])
        assert console.ask_optional_int("Qty [5]: ", 5) == 9
        assert console.ask_optional_text("Name [Nacho]: ", "Nacho") == "Cheddar"


class TestText:

    def test_rejects_commas(self, make_console):
        console, _, out = make_console(["Salt, Vinegar", "Salt & Vinegar"])
        assert console.ask_text("Name: ") == "Salt & Vinegar"
        assert "Commas" in out.getvalue()

    def test_empty_is_allowed(self, make_console):
        console, _, _ = make_console([""])
        assert console.ask_text("Name: ") == ""


class TestYesNo:

    @pytest.mark.parametrize("answer,expected", [("y", True), ("Yes", True), ("n", False), ("NO", False)])
    def test_answers(self, make_console, answer, expected):
        console, _, _ = make_console([answer])
        assert console.ask_yes_no("? ") is expected

    def test_reprompts_on_other_input(self, make_console):
        console, scripted, out = make_console(["", "maybe", "y"])
        assert console.ask_yes_no("? ") is True
        assert len(scripted.prompts) == 3
        assert out.getvalue().count("Please respond with Y or N.") == 2
