"""Tests for the command-line entry point and its exit codes."""

import builtins

import pytest

from chipstock import main


@pytest.fixture(autouse=True)
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def closed_input(prompt=""):
    raise EOFError


def test_interactive_creates_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", closed_input)

    assert main.main([]) == 0
    assert (tmp_path / "chips.csv").exists()
    assert "Input terminated" in capsys.readouterr().out


def test_exit_option(tmp_path, monkeypatch, capsys):
    answers = iter(["0"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    assert main.main(["--data-file", str(tmp_path / "shop.csv")]) == 0
    assert "GOODBYE!!" in capsys.readouterr().out


def test_uninitialisable_store_exits_1(tmp_path):
    # The data path is a directory, so it can be neither read nor created.
    assert main.main(["--data-file", str(tmp_path)]) == 1


def test_export_and_report(tmp_path, capsys):
    (tmp_path / "chips.csv").write_text("1,A,2,S,100,B,0\n2,C,0,S,5,D,1\n")

    assert main.main(["--export", "xlsx", "--report", "--chart"]) == 0

    out = capsys.readouterr().out
    assert (tmp_path / "exports" / "inventory.xlsx").exists()
    assert (tmp_path / "exports" / "stock_levels.png").exists()
    assert "Products      : 2" in out
    assert "Out of stock:" in out


def test_bad_discount_basis():
    with pytest.raises(SystemExit):
        main.main(["--discount-basis", "weekly"])
