from __future__ import annotations

import logging

from uspin.core.logging_setup import LOG_LEVEL_ENV, configure_logging, resolve_level


def test_verbose_wins_over_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    assert resolve_level(verbose=True) == logging.DEBUG
    assert resolve_level() == logging.ERROR


def test_default_and_unknown_levels(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert resolve_level() == logging.WARNING
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert resolve_level() == logging.WARNING


def test_configure_logging_installs_one_handler():
    log = configure_logging(logging.INFO)
    before = list(log.handlers)
    configure_logging(logging.DEBUG)
    assert log.handlers == before
    assert log.level == logging.DEBUG
