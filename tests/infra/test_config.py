from __future__ import annotations

import logging

import pytest

from deal_structure.infra import logging_setup
from deal_structure.infra.config import log_level, save_delay_seconds


def test_save_delay_defaults_to_one_and_a_half_seconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEAL_SAVE_DELAY_SECONDS", raising=False)

    assert save_delay_seconds() == 1.5


def test_save_delay_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_SAVE_DELAY_SECONDS", "0.25")

    assert save_delay_seconds() == 0.25


def test_save_delay_must_be_a_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_SAVE_DELAY_SECONDS", "soon")

    with pytest.raises(RuntimeError, match="must be a number"):
        save_delay_seconds()


def test_save_delay_must_not_be_negative(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_SAVE_DELAY_SECONDS", "-1")

    with pytest.raises(RuntimeError, match="must be >= 0"):
        save_delay_seconds()


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEAL_STRUCTURE_LOG_LEVEL", raising=False)

    assert log_level() == "INFO"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_STRUCTURE_LOG_LEVEL", " debug ")

    assert log_level() == "DEBUG"


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.WARNING, logging.WARNING),
        ("debug", logging.DEBUG),
        ("10", 10),
        ("nonsense", logging.INFO),
    ],
)
def test_parse_level(level: int | str, expected: int) -> None:
    assert logging_setup._parse_level(level) == expected


def test_parse_level_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEAL_STRUCTURE_LOG_LEVEL", "ERROR")

    assert logging_setup._parse_level(None) == logging.ERROR
