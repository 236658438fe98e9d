import logging

import pytest

from loggers import LogManager, PetLogger, SystemLogger

@pytest.fixture
def clean_loggers():
    names = ('petcare.pet', 'petcare.system', 'petcare.events')
    yield names
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

def test_setup_logging_writes_files(tmp_path, monkeypatch, clean_loggers):
    monkeypatch.setenv("LOG_LEVEL_PETCARE_PET", "DEBUG")
    files = LogManager.setup_logging(tmp_path)

    assert set(files) == set(clean_loggers)
    assert logging.getLogger('petcare.pet').level == logging.DEBUG
    assert logging.getLogger('petcare.system').level == logging.INFO

    PetLogger.log_state_change("mood", "content", "anxious")
    SystemLogger.warning("disk is fine")
    for handler in logging.getLogger('petcare.pet').handlers + logging.getLogger('petcare.system').handlers:
        handler.flush()

    assert "mood changed to anxious" in files['petcare.pet'].read_text(encoding='utf-8')
    assert "System Warning: disk is fine" in files['petcare.system'].read_text(encoding='utf-8')

def test_setup_logging_is_idempotent(tmp_path, clean_loggers):
    LogManager.setup_logging(tmp_path)
    LogManager.setup_logging(tmp_path)
    assert len(logging.getLogger('petcare.pet').handlers) == 1

def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_PETCARE_EVENTS", "LOUD")
    assert LogManager.level_for('petcare.events') == logging.INFO
