"""
Tests for logging configuration.
"""

import json
import logging
import os
from unittest.mock import patch

from strava_credentials.logging_config import JsonFormatter, setup_global_logging


def make_record(**extra):
    record = logging.LogRecord(
        name="strava_credentials.core.authenticator",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Strava token exchange failed: %s",
        args=("boom",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_formats_basic_fields(self):
        data = json.loads(JsonFormatter().format(make_record()))

        assert data["severity"] == "WARNING"
        assert data["name"] == "strava_credentials.core.authenticator"
        assert data["message"] == "Strava token exchange failed: boom"
        assert "timestamp" in data

    def test_includes_extra_fields(self):
        data = json.loads(
            JsonFormatter().format(make_record(provider="Strava", athlete_id="42"))
        )

        assert data["provider"] == "Strava"
        assert data["athlete_id"] == "42"
        assert "lineno" not in data


class TestSetupGlobalLogging:
    """Tests for setup_global_logging."""

    def test_local_uses_json_formatter(self):
        root_logger = logging.getLogger()
        original_handlers = list(root_logger.handlers)
        original_level = root_logger.level

        try:
            with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
                setup_global_logging()

            assert isinstance(root_logger.handlers[-1].formatter, JsonFormatter)
            assert root_logger.level == logging.DEBUG
        finally:
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)

    def test_cloud_run_uses_cloud_logging(self):
        with patch.dict(os.environ, {"K_SERVICE": "strava-credentials"}, clear=True):
            with patch("google.cloud.logging.Client") as mock_client:
                setup_global_logging()

        mock_client.return_value.setup_logging.assert_called_once_with(
            log_level=logging.INFO
        )

    def test_cloud_run_falls_back_to_basic_config(self, caplog):
        with patch.dict(os.environ, {"K_SERVICE": "strava-credentials"}, clear=True):
            with patch(
                "google.cloud.logging.Client", side_effect=RuntimeError("no credentials")
            ):
                setup_global_logging()

        assert "Cloud Logging setup failed" in caplog.text
