"""
Tests for use case result helpers

Err/Ok 결과 타입과 저장소 예외 변환 데코레이터 테스트
"""

import pytest
from common.application.result import Err, ErrorCode, FieldError, Ok
from common.application.store_errors import store_errors_as_result
from common.exceptions import ConcurrencyConflictError, StoreUnavailableError


def test_validation_err_carries_all_field_errors():
    err = Err.validation(
        [FieldError("quantity", "Must be at least 1."), FieldError("title", "Required.")]
    )

    assert err.code == ErrorCode.VALIDATION_ERROR
    assert err.details == {
        "errors": [
            {"field": "quantity", "message": "Must be at least 1."},
            {"field": "title", "message": "Required."},
        ]
    }
    assert [e.field for e in err.field_errors] == ["quantity", "title"]


def test_non_validation_err_has_no_field_errors():
    assert Err(code=ErrorCode.NOT_FOUND, message="x").field_errors == []


class TestStoreErrorsAsResult:
    def test_passes_through_results(self):
        @store_errors_as_result
        def ok():
            return Ok(1)

        assert ok() == Ok(1)

    def test_store_unavailable(self):
        @store_errors_as_result
        def down():
            raise StoreUnavailableError("timeout")

        result = down()

        assert isinstance(result, Err)
        assert result.code == ErrorCode.STORE_UNAVAILABLE
        assert result.details == {"reason": "timeout"}

    def test_conflict(self):
        @store_errors_as_result
        def stale():
            raise ConcurrencyConflictError()

        result = stale()

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CONFLICT
        assert result.details is None

    def test_other_exceptions_propagate(self):
        @store_errors_as_result
        def bug():
            raise ValueError("bug")

        with pytest.raises(ValueError):
            bug()
