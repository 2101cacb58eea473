import logging

import pytest

from projplot.logging_config import THIRD_PARTY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    monkeypatch.delenv("PROJPLOT_LOG_LEVEL", raising=False)
    yield
    monkeypatch.delenv("PROJPLOT_LOG_LEVEL", raising=False)
    setup_logging()


@pytest.mark.parametrize("verbosity, level", [
    (-3, logging.ERROR),
    (-2, logging.ERROR),
    (-1, logging.WARNING),
    (0, logging.INFO),
    (1, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_verbosity_sets_package_level(verbosity, level):
    logger = setup_logging(verbosity=verbosity)
    assert logger.name == "projplot"
    assert logger.level == level
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == level


def test_environment_overrides_verbosity(monkeypatch):
    monkeypatch.setenv("PROJPLOT_LOG_LEVEL", "error")
    assert setup_logging(verbosity=1).level == logging.ERROR


def test_unknown_environment_level_ignored(monkeypatch):
    monkeypatch.setenv("PROJPLOT_LOG_LEVEL", "loud")
    assert setup_logging(verbosity=0).level == logging.INFO


def test_third_party_loggers_held_at_warning():
    setup_logging(verbosity=1)
    for name in THIRD_PARTY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

    setup_logging(verbosity=2)
    assert logging.getLogger("pyproj").level == logging.INFO
    assert logging.getLogger("matplotlib").level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_log_file_receives_debug_messages(tmp_path):
    log_file = tmp_path / "projplot.log"
    logger = setup_logging(verbosity=-1, log_file=str(log_file))

    logging.getLogger("projplot.coords.proj").debug("trained panel")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert logger.handlers[0].level == logging.WARNING
    assert "trained panel" in log_file.read_text()


def test_unwritable_log_file_keeps_console(tmp_path):
    logger = setup_logging(log_file=str(tmp_path / "missing" / "projplot.log"))
    assert len(logger.handlers) == 1
