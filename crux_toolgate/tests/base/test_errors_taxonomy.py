"""Unit coverage for the tool policy error taxonomy."""

from __future__ import annotations

import pytest

from crux_toolgate.base.errors import (
    ConfigLoadError,
    ConfigurationIntegrityError,
    ErrorCode,
    FileRestrictionError,
    ToolPolicyError,
)


def test_subclasses_carry_default_codes() -> None:
    assert ConfigurationIntegrityError().code is ErrorCode.CONFLICT  # nosec B101
    assert FileRestrictionError().code is ErrorCode.FORBIDDEN  # nosec B101
    assert ConfigLoadError().code is ErrorCode.VALIDATION  # nosec B101
    for cls in (ConfigurationIntegrityError, FileRestrictionError, ConfigLoadError):
        assert issubclass(cls, ToolPolicyError)  # nosec B101


def test_to_dict_omits_empty_scope() -> None:
    err = ConfigurationIntegrityError(message="dup")
    assert err.to_dict() == {"code": "conflict", "message": "dup"}  # nosec B101

    scoped = FileRestrictionError(message="nope", tool="write_to_file", mode="architect", file_path="a.py")
    assert scoped.to_dict() == {  # nosec B101
        "code": "forbidden",
        "message": "nope",
        "tool": "write_to_file",
        "mode": "architect",
    }


def test_str_includes_scope_and_message() -> None:
    err = ToolPolicyError(code=ErrorCode.NOT_FOUND, message="missing", tool="t", mode="m")
    assert str(err) == "m:t not_found: missing"  # nosec B101
    with pytest.raises(ToolPolicyError, match="missing"):
        raise err
