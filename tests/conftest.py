"""Shared fixtures: a throwaway data file, a loaded store and scripted operator input."""

import io

import pytest

from chipstock.db.store import RecordStore
from chipstock.models.product import Chip
from chipstock.ui.console import Console


class ScriptedInput:
    """Feeds canned answers to Console; raises EOFError once they run out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "chips.csv"


@pytest.fixture
def sample_chips():
    return [
        Chip(1, "A", 10, "S", 100, "B", 0),
        Chip(7, "Nacho", 3, "Crunch Ltd", 250, "Doritos", 2),
        Chip(12, "Salted", 0, "Spud Co", 3500, "Lays", 5),
    ]


@pytest.fixture
def store(data_file, sample_chips):
    s = RecordStore(data_file)
    s.save(sample_chips)
    return s


@pytest.fixture
def make_console():
    """make_console(answers) -> (console, scripted_input, output_buffer)"""

    def _make(answers):
        scripted = ScriptedInput(answers)
        out = io.StringIO()
        return Console(scripted, out), scripted, out

    return _make
