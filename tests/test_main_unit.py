"""Tests for the command-line entry point and settings."""

import json
import logging

import pytest

import main as entry
from matrixspaces import settings


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1 2 3; 4 5 6", [["1", "2", "3"], ["4", "5", "6"]]),
        ("1/2, 3;4,5", [["1/2", "3"], ["4", "5"]]),
        ("1 / 2  -3 ;", [["1/2", "-3"]]),
    ],
)
def test_parse_grid(text, expected):
    assert entry.parse_grid(text) == expected


def test_main_prints_trail(capsys):
    assert entry.main(["1 2 3; 4 5 6", "--steps"]) == 0
    out = capsys.readouterr().out
    assert "Rank: 2" in out
    assert "Step 1: Swap row 1 and row 2" in out


def test_main_json(capsys):
    assert entry.main(["1 2; 2 4", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["rank"] == 1
    assert data["null_space"]["display"] == [["-2", "1"]]


def test_main_error(capsys):
    assert entry.main(["1 2; 3"]) == 1
    err = capsys.readouterr().err
    assert "Error: All rows must have the same number of columns." in err


def test_main_runs_examples(capsys):
    assert entry.main([]) == 0
    out = capsys.readouterr().out
    for example in entry.EXAMPLE_MATRICES:
        assert example["name"] in out


def test_verbose_sets_debug(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    entry.main(["1", "--verbose"])
    assert captured["level"] == "DEBUG"


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(settings.LOG_LEVEL_ENV, "info")
    assert settings.log_level_from_env() == "INFO"
    monkeypatch.delenv(settings.LOG_LEVEL_ENV)
    assert settings.log_level_from_env() == "WARNING"


def test_get_settings():
    s = settings.get_settings({"decimals": 2})
    assert s["decimals"] == 2
    assert s["track_operations"] is True
    assert settings.DEFAULT_SETTINGS["decimals"] == 4
    with pytest.raises(KeyError):
        settings.get_settings({"colour": "red"})


@pytest.mark.parametrize(
    "flags,expected",
    [([], False), (["--steps"], True), (["--json"], True)],
)
def test_operation_log_only_when_shown(monkeypatch, capsys, flags, expected):
    seen = []
    real = entry.compute_report

    def spy(grid, track_operations=True):
        seen.append(track_operations)
        return real(grid, track_operations=track_operations)

    monkeypatch.setattr(entry, "compute_report", spy)
    assert entry.main(["1 2; 3 4", *flags]) == 0
    assert seen == [expected]
