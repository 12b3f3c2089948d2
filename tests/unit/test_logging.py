"""Unit tests for src/utils/logging.py."""

from __future__ import annotations

import logging

import pytest

from src.utils.logging import configure_logging, mask_secrets


class TestMaskSecrets:
    def test_token_values_are_masked(self) -> None:
        event = {"event": "request_sent", "token": "s3cret", "authorization": "Token s3cret"}

        result = mask_secrets(None, "info", event)

        assert result["token"] == "***"
        assert result["authorization"] == "***"
        assert result["event"] == "request_sent"

    def test_empty_token_left_alone(self) -> None:
        result = mask_secrets(None, "warning", {"event": "stock_photo_token_missing", "token": ""})

        assert result["token"] == ""

    def test_other_keys_untouched(self) -> None:
        event = {"event": "image_page_fetched", "category_id": "health", "count": 3}

        assert mask_secrets(None, "info", dict(event)) == event


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_httpx_held_back_at_info(self) -> None:
        configure_logging("INFO", app_env="test")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger().level == logging.INFO

    def test_httpx_follows_debug(self) -> None:
        configure_logging("debug", app_env="test")

        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_repeat_calls_keep_one_handler(self) -> None:
        configure_logging("INFO", app_env="test")
        configure_logging("INFO", app_env="production")

        assert len(logging.getLogger().handlers) == 1
