"""Tests for error classification."""

from __future__ import annotations

import re

import pytest
import yaml
from pydantic import BaseModel, ValidationError

from gluadoc.resilience.errors import (
    ConfigurationError,
    ErrorClass,
    classify_error,
    is_fatal,
)


class _Strict(BaseModel):
    n: int


def _validation_error() -> ValidationError:
    try:
        _Strict.model_validate({"n": "not a number"})
    except ValidationError as exc:
        return exc
    raise AssertionError("expected a ValidationError")


# ── classify_error ───────────────────────────────────────────


@pytest.mark.parametrize(
    "error",
    [
        ConfigurationError("missing"),
        yaml.YAMLError("bad yaml"),
        re.error("bad pattern"),
    ],
)
def test_configuration_types(error: Exception) -> None:
    assert classify_error(error) == ErrorClass.CONFIGURATION


def test_validation_error_is_configuration() -> None:
    """ValidationError subclasses ValueError but is still configuration."""
    assert classify_error(_validation_error()) == ErrorClass.CONFIGURATION


def test_os_error_is_filesystem() -> None:
    assert classify_error(PermissionError("denied")) == ErrorClass.FILESYSTEM


@pytest.mark.parametrize(
    "error",
    [
        ValueError("x"),
        IndexError("y"),
        UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"),
    ],
)
def test_malformed_input(error: Exception) -> None:
    assert classify_error(error) == ErrorClass.MALFORMED_INPUT


def test_message_fallbacks() -> None:
    """Untyped exceptions fall back to message matching."""
    config_error = RuntimeError("config table broken")
    assert classify_error(config_error) == ErrorClass.CONFIGURATION
    assert classify_error(RuntimeError("No such file: x")) == ErrorClass.FILESYSTEM
    assert classify_error(RuntimeError("boom")) == ErrorClass.UNKNOWN


# ── is_fatal ─────────────────────────────────────────────────


def test_only_configuration_error_is_fatal() -> None:
    assert is_fatal(ConfigurationError("x"))
    assert not is_fatal(ValueError("x"))
    assert not is_fatal(OSError("x"))
    assert not is_fatal(RuntimeError("boom"))


def test_configuration_classes_raised_mid_scan_are_not_fatal() -> None:
    """Classified as configuration for logging, but still per-file."""
    untyped = RuntimeError("config table broken")
    assert classify_error(untyped) == ErrorClass.CONFIGURATION
    assert not is_fatal(untyped)
    assert not is_fatal(_validation_error())
    assert not is_fatal(yaml.YAMLError("bad yaml"))
