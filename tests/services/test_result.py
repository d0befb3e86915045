"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from create_clean_arch.domain.errors import ExternalToolFailure, TargetExists
from create_clean_arch.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="create_project", data={"name": "demo"})
        assert result.ok is True
        assert result.data == {"name": "demo"}
        assert result.warnings == []
        assert result.error is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=False,
            op="create_project",
            error=ServiceError(code="TARGET_EXISTS", message="exists"),
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "TARGET_EXISTS"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestFromException:
    def test_copies_code_message_detail(self) -> None:
        error = ServiceError.from_exception(TargetExists("already there", path="/tmp/demo"))
        assert error.code == "TARGET_EXISTS"
        assert error.message == "already there"
        assert error.detail == {"path": "/tmp/demo"}

    def test_tool_failure_carries_step(self) -> None:
        error = ServiceError.from_exception(ExternalToolFailure("install", "npm failed"))
        assert error.code == "EXTERNAL_TOOL_FAILURE"
        assert error.detail["step"] == "install"
