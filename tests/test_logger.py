"""Tests for logging configuration."""
import logging
from logging.config import dictConfig

from app.utils.logger import get_log_config


def test_app_logger_level_follows_setting():
    config = get_log_config("debug")

    assert config["loggers"]["app"]["level"] == "DEBUG"
    assert config["loggers"]["botocore"]["level"] == "WARNING"


def test_log_config_is_applicable():
    dictConfig(get_log_config("INFO"))

    assert logging.getLogger("app").level == logging.INFO
    assert logging.getLogger("app.services.storage_service").getEffectiveLevel() == logging.INFO
