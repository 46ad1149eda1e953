"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_argon2.kernel.security import DEFAULT_SENSITIVE_FIELDS
from mp_argon2.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({"password": "hunter2", "user": "bob"}) == {
            "password": "[REDACTED]",
            "user": "bob",
        }

    def test_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Password": "x"})["Password"] == "[REDACTED]"

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter()
        out = f.redact_deep({"outer": {"salt": "abc", "ok": 1}})
        assert out == {"outer": {"salt": "[REDACTED]", "ok": 1}}

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"pin"}))
        assert f.redact({"pin": "1234", "password": "p"}) == {"pin": "[REDACTED]", "password": "p"}

    def test_defaults_cover_hash_material(self) -> None:
        assert {"password", "salt", "digest"} <= DEFAULT_SENSITIVE_FIELDS

    def test_usable_as_processor(self) -> None:
        f = SensitiveFieldsFilter()
        out = f(None, "info", {"event": "login", "password": "p"})
        assert out == {"event": "login", "password": "[REDACTED]"}


class TestJsonLoggerFactory:
    def test_configure_installs_single_json_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.DEBUG

    def test_output_is_json_and_redacted(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure()
        get_logger("test.json").info("login", password="hunter2", user="bob")
        err = capsys.readouterr().err
        assert '"event": "login"' in err
        assert "hunter2" not in err
        assert "[REDACTED]" in err


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        log = get_logger("x")
        assert callable(log.info)
        assert callable(log.debug)

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", component="hasher").info("hello")
        assert logs[0]["component"] == "hasher"
