import json
import logging

import pytest

from logging_config import LOGGER_NAME, disable_logging, get_logger, setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    saved_propagate = logger.propagate
    for h in saved:
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for h in saved:
        logger.addHandler(h)
    logger.propagate = saved_propagate


def test_setup_logging_writes_json_lines(clean_logger, tmp_path):
    log_path = tmp_path / "logs" / "kvedit.log"
    setup_logging(str(log_path), "DEBUG")

    get_logger("dispatcher").debug("committed pair (%s)", "new")
    for h in clean_logger.handlers:
        h.flush()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["level"] == "DEBUG"
    assert record["logger"] == "kvedit.dispatcher"
    assert record["message"] == "committed pair (new)"


def test_setup_logging_does_not_duplicate_handlers(clean_logger, tmp_path):
    log_path = str(tmp_path / "kvedit.log")
    setup_logging(log_path)
    setup_logging(log_path)
    assert len(clean_logger.handlers) == 1
    assert clean_logger.propagate is False


def test_exceptions_are_included(clean_logger, tmp_path):
    log_path = tmp_path / "kvedit.log"
    setup_logging(str(log_path))
    try:
        raise OSError("disk full")
    except OSError:
        get_logger("main").error("write failed", exc_info=True)
    for h in clean_logger.handlers:
        h.flush()

    record = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
    assert "disk full" in record["exception"]


def test_get_logger_without_name_is_base():
    assert get_logger() is logging.getLogger(LOGGER_NAME)
    assert get_logger("x").name == "kvedit.x"


def test_unopenable_log_file_leaves_logger_silent(clean_logger, tmp_path, capsys):
    log_path = tmp_path / "kvedit.log"
    log_path.mkdir()
    with pytest.raises(OSError):
        setup_logging(str(log_path))

    assert [type(h) for h in clean_logger.handlers] == [logging.NullHandler]
    assert clean_logger.propagate is False
    try:
        raise ValueError("boom")
    except ValueError:
        get_logger("main").error("failed", exc_info=True)
    assert capsys.readouterr().err == ""


def test_disable_logging_is_idempotent(clean_logger):
    disable_logging()
    disable_logging()
    assert len(clean_logger.handlers) == 1
    assert clean_logger.propagate is False
