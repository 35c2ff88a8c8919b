from __future__ import annotations

import functools
from typing import Callable, TypeVar

from common.application.result import Err, ErrorCode
from common.exceptions import ConcurrencyConflictError, StoreUnavailableError

F = TypeVar("F", bound=Callable)


def store_errors_as_result(func: F) -> F:
    """
    Entity Store 예외를 Err 결과로 변환하는 데코레이터.

    - StoreUnavailableError -> STORE_UNAVAILABLE
    - ConcurrencyConflictError -> CONFLICT
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except StoreUnavailableError as e:
            return Err(
                code=ErrorCode.STORE_UNAVAILABLE,
                message="Entity store is unavailable",
                details={"reason": str(e)} if str(e) else None,
            )
        except ConcurrencyConflictError as e:
            return Err(
                code=ErrorCode.CONFLICT,
                message="Entity was modified concurrently",
                details={"reason": str(e)} if str(e) else None,
            )

    return wrapper  # type: ignore[return-value]
