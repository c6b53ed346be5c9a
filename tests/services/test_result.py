"""Tests for ServiceResult and ServiceError."""

import pytest

from scssimporter.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult.success("resolve", {"kind": "stylesheet"})
        assert result.ok is True
        assert result.error is None
        assert result.warnings == []

    def test_failure(self) -> None:
        result = ServiceResult.failure("resolve", "DEFERRED", "nope", reference="x")
        assert result.ok is False
        assert result.error == ServiceError(
            code="DEFERRED", message="nope", detail={"reference": "x"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult.success("clean", {})
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult.success("clean", {"removed": True}, warnings=["w"])
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result
