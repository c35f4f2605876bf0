"""Settings, user .env persistence and logging setup."""

from __future__ import annotations

import logging
import sys

import pytest
from pydantic import ValidationError

from dodopayments.core.config import (
    ClientSettings,
    get_user_env_file,
    read_user_env_vars,
    write_user_env_vars,
)
from dodopayments.core.domain.environment import Environment
from dodopayments.core.logs import LOGGER_NAME, setup_logging


def test_defaults():
    settings = ClientSettings(_env_file=None)

    assert settings.api_key is None
    assert settings.environment is Environment.LIVE_MODE
    assert settings.timeout_seconds == 60.0
    assert settings.max_retries == 2
    assert settings.log_level is None
    assert settings.resolved_base_url() == "https://live.dodopayments.com"


def test_values_come_from_prefixed_environment(monkeypatch):
    monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "sk_env")
    monkeypatch.setenv("DODO_PAYMENTS_ENVIRONMENT", "test_mode")
    monkeypatch.setenv("DODO_PAYMENTS_WEBHOOK_KEY", "whsec_abc")
    monkeypatch.setenv("DODO_PAYMENTS_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("DODO_PAYMENTS_LOG", "DEBUG")

    settings = ClientSettings(_env_file=None)

    assert settings.api_key == "sk_env"
    assert settings.environment is Environment.TEST_MODE
    assert settings.webhook_key == "whsec_abc"
    assert settings.timeout_seconds == 5.0
    assert settings.log_level == "debug"
    assert settings.resolved_base_url() == "https://test.dodopayments.com"


def test_base_url_overrides_environment(monkeypatch):
    monkeypatch.setenv("DODO_PAYMENTS_BASE_URL", "http://localhost:4010")

    assert ClientSettings(_env_file=None).resolved_base_url() == "http://localhost:4010"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DODO_PAYMENTS_TIMEOUT_SECONDS", "0"),
        ("DODO_PAYMENTS_MAX_RETRIES", "11"),
        ("DODO_PAYMENTS_MAX_RETRIES", "-1"),
        ("DODO_PAYMENTS_LOG", "verbose"),
        ("DODO_PAYMENTS_ENVIRONMENT", "staging"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        ClientSettings(_env_file=None)


def test_settings_read_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DODO_PAYMENTS_API_KEY=sk_file\nDODO_PAYMENTS_MAX_RETRIES=4\n", encoding="utf-8")

    settings = ClientSettings(_env_file=env_file)

    assert settings.api_key == "sk_file"
    assert settings.max_retries == 4


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
def test_user_env_file_round_trip(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    path = write_user_env_vars({"DODO_PAYMENTS_API_KEY": "sk_1", "DODO_PAYMENTS_WEBHOOK_KEY": None})
    write_user_env_vars({"DODO_PAYMENTS_ENVIRONMENT": "test_mode"})

    assert path == get_user_env_file() == tmp_path / "dodopayments" / ".env"
    assert read_user_env_vars() == {
        "DODO_PAYMENTS_API_KEY": "sk_1",
        "DODO_PAYMENTS_ENVIRONMENT": "test_mode",
    }
    assert path.read_text(encoding="utf-8").startswith("# dodopayments user config")


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
def test_missing_user_env_file_reads_empty(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert read_user_env_vars() == {}


@pytest.fixture()
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_is_a_no_op_without_level(clean_logger):
    assert setup_logging(None) is None
    assert setup_logging("") is None


def test_setup_logging_attaches_a_single_handler(clean_logger):
    before = len(clean_logger.handlers)

    setup_logging("debug")
    logger = setup_logging("info")

    assert logger is clean_logger
    assert logger.level == logging.INFO
    assert len(clean_logger.handlers) == before + 1
