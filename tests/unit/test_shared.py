"""
Unit tests for the shared configuration, error and logging helpers.
"""

import httpx
import pytest

from shared.config import EtimsSettings
from shared.errors import ApiError, AuthenticationError, EtimsError, ValidationError, format_error
from shared.logging import add_correlation_context, add_service_context, clear_context, set_request_id


class TestSettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("ETIMS_ENV", "ETIMS_API_USERNAME", "ETIMS_API_PASSWORD", "ETIMS_CORS_ALLOWED_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = EtimsSettings(_env_file=None)

        assert settings.is_production is False
        assert settings.api_base_url == "https://etims-api-sbx.kra.go.ke"
        assert settings.port == 5000
        assert settings.token_refresh_skew_seconds == 300
        assert settings.cors_origins == ["*"]

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ETIMS_ENV", "production")
        monkeypatch.setenv("ETIMS_API_USERNAME", "user")
        monkeypatch.setenv("ETIMS_CORS_ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com")

        settings = EtimsSettings(_env_file=None)

        assert settings.is_production is True
        assert settings.api_base_url == "https://etims-api.kra.go.ke/etims-api"
        assert settings.api_username == "user"
        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]

    def test_trailing_slash_is_stripped(self):
        settings = EtimsSettings(_env_file=None, dev_api_base_url="https://sandbox.example.com/")

        assert settings.api_base_url == "https://sandbox.example.com"


class TestErrors:
    """Test cases for the failure envelope."""

    def test_api_error_defaults_to_400(self):
        error = ApiError("Invalid TIN", error_code="9999")

        assert error.status_code == 400
        assert format_error(error) == {
            "success": False,
            "error": {"message": "Invalid TIN", "code": "9999"},
            "statusCode": 400,
        }

    def test_api_error_details(self):
        error = ApiError("Rejected", 422, "901", details={"field": "invcNo"})

        assert format_error(error)["error"]["details"] == {"field": "invcNo"}

    def test_validation_error_lists_fields(self):
        error = ValidationError(errors=[{"field": "tin", "message": "Field required"}])

        assert format_error(error) == {
            "success": False,
            "error": {
                "message": "Validation failed",
                "validationErrors": [{"field": "tin", "message": "Field required"}],
            },
            "statusCode": 400,
        }

    def test_authentication_error(self):
        assert format_error(AuthenticationError("Authentication required"))["statusCode"] == 401

    def test_error_hierarchy(self):
        assert issubclass(ApiError, EtimsError)
        assert issubclass(ValidationError, EtimsError)
        assert issubclass(AuthenticationError, EtimsError)

    @pytest.mark.parametrize("exc,message", [
        (httpx.ConnectError("connection refused"), "connection refused"),
        (RuntimeError(), "Internal Server Error"),
    ])
    def test_unclassified_errors_are_500(self, exc, message):
        envelope = format_error(exc)

        assert envelope["statusCode"] == 500
        assert envelope["error"] == {"message": message}


class TestLoggingContext:
    """Test cases for structlog processors."""

    def test_request_id_is_added(self):
        request_id = set_request_id("req-42")
        try:
            event = add_correlation_context(None, "info", {"event": "HTTP request"})
        finally:
            clear_context()

        assert request_id == "req-42"
        assert event["request_id"] == "req-42"

    def test_request_id_generated_when_missing(self):
        request_id = set_request_id()
        clear_context()

        assert len(request_id) == 36

    def test_no_request_id_outside_request(self):
        clear_context()

        assert "request_id" not in add_correlation_context(None, "info", {"event": "startup"})

    def test_service_name_from_logger_name(self):
        event = add_service_context(None, "info", {"logger": "etims.api_client"})

        assert event["service"] == "etims"
