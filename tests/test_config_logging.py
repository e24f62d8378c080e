import logging

import pytest

from c2h.config import Settings, get_settings
from c2h.logging_config import configure_logging


@pytest.fixture
def restore_c2h_logger():
    yield
    logger = logging.getLogger("c2h")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("C2H_LOG_JSON", "1")
    monkeypatch.setenv("C2H_WEBHOOK_URL_SCHEMES", " HTTPS ,, http ")

    settings = get_settings()

    assert settings.log_json is True
    assert settings.webhook_url_schemes_list == ["https", "http"]
    assert get_settings() is settings


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.error_include_input is False
    assert settings.webhook_url_schemes_list == ["http", "https"]


def test_json_logging(capsys, restore_c2h_logger):
    configure_logging(Settings(_env_file=None, log_json=True, log_level="debug"))

    logging.getLogger("c2h.services.validation").debug("Template rejected")

    err = capsys.readouterr().err
    assert '"event": "Template rejected"' in err
    assert '"logger": "c2h.services.validation"' in err


def test_unknown_log_level(restore_c2h_logger):
    with pytest.raises(ValueError):
        configure_logging(Settings(_env_file=None, log_level="chatty"))


def test_reconfiguring_replaces_handler(restore_c2h_logger):
    configure_logging(Settings(_env_file=None))
    logger = configure_logging(Settings(_env_file=None, log_level="warning"))

    assert logger.name == "c2h"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_console_logging(capsys, restore_c2h_logger):
    configure_logging(Settings(_env_file=None, log_level="info"))

    logging.getLogger("c2h.services.lifecycle").info("Rejected approve")

    err = capsys.readouterr().err
    assert "Rejected approve" in err
    assert "c2h.services.lifecycle" in err
