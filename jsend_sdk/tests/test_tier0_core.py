"""Tests for tier0_core modules."""
from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from jsend_sdk.tier0_core.config import JSendConfig, _reset_config, get_config, load_config
from jsend_sdk.tier0_core.envelope import (
    Envelope,
    Status,
    error,
    fail,
    is_envelope,
    parse_envelope,
    success,
)
from jsend_sdk.tier0_core.errors import (
    ConfigurationError,
    EnvelopeRejected,
    ErrorResponse,
    FailResponse,
    JSendError,
)
from jsend_sdk.tier0_core.http import HTTP, RawResponse, Request, TransportFailure


# ── envelope ───────────────────────────────────────────────────────────────

class TestEnvelope:
    @pytest.mark.parametrize("status", ["success", "fail", "error"])
    def test_valid_statuses_conform(self, status):
        assert is_envelope({"status": status}) is True

    @pytest.mark.parametrize("value", [
        None,
        [],
        [{"status": "success"}],
        "success",
        42,
        {},
        {"status": "ok"},
        {"status": "SUCCESS"},
        {"status": None},
        {"data": {"status": "success"}},
    ])
    def test_non_conforming_values(self, value):
        assert is_envelope(value) is False
        assert parse_envelope(value) is None

    def test_parse_keeps_unknown_fields(self):
        body = {"status": "success", "data": {"id": 1}, "meta": {"page": 2}}
        envelope = parse_envelope(body)
        assert envelope is not None
        assert envelope.as_dict() == body
        assert envelope.meta == {"page": 2}

    def test_as_dict_omits_unset_fields(self):
        envelope = parse_envelope({"status": "fail", "message": "invalid email"})
        assert envelope.as_dict() == {"status": "fail", "message": "invalid email"}
        assert "code" not in envelope.as_dict()

    def test_status_is_plain_string(self):
        envelope = success({"id": 1})
        assert envelope.status == "success"
        assert envelope.status == Status.SUCCESS

    def test_envelope_is_frozen(self):
        envelope = success(None)
        with pytest.raises(PydanticValidationError):
            envelope.status = "error"

    def test_invalid_status_rejected(self):
        with pytest.raises(PydanticValidationError):
            Envelope(status="maybe")

    def test_ok_only_for_success(self):
        assert success(1).ok is True
        assert fail("nope").ok is False
        assert error("boom", 500).ok is False

    def test_success_keeps_null_data(self):
        assert success(None).as_dict() == {"status": "success", "data": None}


# ── http ───────────────────────────────────────────────────────────────────

class TestHttp:
    def test_http_status_codes(self):
        assert HTTP.OK == 200
        assert HTTP.NO_CONTENT == 204
        assert HTTP.NOT_FOUND == 404
        assert HTTP.UNREACHABLE == 0

    def test_raw_response_success_range(self):
        assert RawResponse(200).is_success is True
        assert RawResponse(299).is_success is True
        assert RawResponse(302).is_success is False
        assert RawResponse(None).is_success is False

    def test_zero_status_never_reached_server(self):
        assert RawResponse(0).reached_server is False
        assert RawResponse(None).reached_server is False
        assert RawResponse(404, "Not Found").reached_server is True

    def test_request_line(self):
        assert Request("GET", "/users/1").line == "GET /users/1"

    def test_request_is_immutable(self):
        request = Request("POST", "/users", body={"name": "a"})
        with pytest.raises(AttributeError):
            request.method = "PUT"

    def test_transport_failure_reason(self):
        assert str(TransportFailure(RawResponse(404, "Not Found"))) == "HTTP 404 Not Found"
        assert str(TransportFailure(None)) == "server unreachable"
        assert TransportFailure(None).response is None


# ── errors ─────────────────────────────────────────────────────────────────

class TestErrors:
    def test_configuration_error(self):
        e = ConfigurationError(user_message="Bad base_url")
        assert isinstance(e, JSendError)
        assert e.code == "configuration_error"
        assert e.to_dict() == {"error": {"code": "configuration_error", "message": "Bad base_url"}}

    def test_for_envelope_fail(self):
        envelope = fail("invalid email")
        exc = EnvelopeRejected.for_envelope(envelope)
        assert isinstance(exc, FailResponse)
        assert exc.envelope is envelope
        assert exc.status == "fail"
        assert exc.user_message == "invalid email"

    def test_for_envelope_error(self):
        exc = EnvelopeRejected.for_envelope(error("Not Found", 404), detail="GET /x")
        assert isinstance(exc, ErrorResponse)
        assert exc.status_code == 404
        assert "GET /x" in str(exc)
        assert exc.to_dict() == {"status": "error", "message": "Not Found", "code": 404}

    def test_cannot_reject_success(self):
        with pytest.raises(ValueError):
            EnvelopeRejected.for_envelope(success(None))

    def test_non_string_message_gets_default(self):
        envelope = parse_envelope({"status": "fail", "message": {"email": "taken"}})
        exc = EnvelopeRejected.for_envelope(envelope)
        assert exc.user_message == "The request was rejected."


# ── config ─────────────────────────────────────────────────────────────────

class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.base_url == ""
        assert config.request_hook is None
        assert config.response_hook is None
        assert config.transport == "mock"

    def test_base_url_by_name(self):
        assert load_config(base_url="https://api.example.com").base_url == "https://api.example.com"

    def test_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("JSEND_BASE_URL", "https://env.example.com")
        _reset_config()
        assert get_config().base_url == "https://env.example.com"

    def test_base_url_must_be_string(self):
        with pytest.raises(ConfigurationError) as info:
            load_config(base_url=42)
        assert "base_url" in str(info.value) or "JSEND_BASE_URL" in str(info.value)

    def test_request_hook_must_be_callable(self):
        with pytest.raises(ConfigurationError):
            load_config(request_hook="not callable")

    def test_response_hook_accepts_callable(self):
        def hook(request, envelope):
            pass
        assert load_config(response_hook=hook).response_hook is hook

    def test_response_hook_accepts_alert_token(self):
        assert load_config(response_hook="alert").response_hook == "alert"

    def test_response_hook_rejects_other_strings(self):
        with pytest.raises(ConfigurationError):
            load_config(response_hook="popup")

    def test_response_hook_rejects_non_callables(self):
        with pytest.raises(ConfigurationError):
            load_config(response_hook=123)

    def test_unknown_transport_rejected(self):
        with pytest.raises(ConfigurationError):
            load_config(transport="carrier-pigeon")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            load_config(timeout=0)

    def test_config_is_frozen(self):
        config = load_config()
        with pytest.raises(PydanticValidationError):
            config.base_url = "https://changed.example.com"

    def test_get_config_is_cached(self):
        assert get_config() is get_config()
        assert isinstance(get_config(), JSendConfig)


# ── logging ────────────────────────────────────────────────────────────────

class TestLogging:
    def test_redacts_top_level_key(self):
        from jsend_sdk.tier0_core.logging import _redact_processor
        event = _redact_processor(None, "debug", {"event": "GET /me", "token": "abc"})
        assert event == {"event": "GET /me", "token": "[REDACTED]"}

    def test_redacts_inside_envelope(self):
        from jsend_sdk.tier0_core.logging import _redact_processor
        envelope = {"status": "success", "data": {"name": "bob", "password": "s3cr3t"}}
        event = _redact_processor(None, "debug", {"event": "POST /login", "envelope": envelope})
        assert event["envelope"] == {
            "status": "success",
            "data": {"name": "bob", "password": "[REDACTED]"},
        }

    def test_redacts_list_of_dicts(self):
        from jsend_sdk.tier0_core.logging import _redact_processor
        data = [{"id": 1, "api_key": "k1"}, {"id": 2, "Access_Token": "t2"}, "plain"]
        event = _redact_processor(None, "debug", {"event": "GET /keys", "envelope": {"data": data}})
        assert event["envelope"]["data"] == [
            {"id": 1, "api_key": "[REDACTED]"},
            {"id": 2, "Access_Token": "[REDACTED]"},
            "plain",
        ]

    def test_callers_dict_is_not_mutated(self):
        from jsend_sdk.tier0_core.logging import _redact_processor
        envelope = {"status": "success", "data": {"secret": "x", "items": [{"token": "y"}]}}
        _redact_processor(None, "debug", {"event": "GET /x", "envelope": envelope})
        assert envelope == {"status": "success", "data": {"secret": "x", "items": [{"token": "y"}]}}

    def test_non_sensitive_fields_unchanged(self):
        from jsend_sdk.tier0_core.logging import _redact_processor
        event = {"event": "GET /u", "method": "GET", "envelope": {"status": "fail", "message": "m"}}
        assert _redact_processor(None, "warning", dict(event)) == event

    def test_only_get_logger_is_exported(self):
        import jsend_sdk.tier0_core.logging as _logging
        assert _logging.__all__ == ["get_logger"]
        assert not hasattr(_logging, "clear_context")

    def test_first_logger_uses_given_config(self, monkeypatch):
        import jsend_sdk.tier0_core.logging as _logging
        seen = []
        monkeypatch.setattr(_logging, "_configured", False)
        monkeypatch.setattr(_logging, "_configure_structlog", seen.append)
        config = load_config(log_level="error", log_format="json")
        _logging.get_logger("jsend_sdk.test", config)
        _logging.get_logger("jsend_sdk.test", load_config(log_level="debug"))
        assert seen == [config]
