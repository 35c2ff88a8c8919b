"""
Entity Store 어댑터가 던지는 예외.

유스케이스는 이 예외들을 잡아 같은 종류의 Err 로 바꿔 반환합니다.
재시도는 호출자(경계 계층)의 몫입니다.
"""


class StoreError(Exception):
    """Base exception for entity store failures."""


class StoreUnavailableError(StoreError):
    """
    Raised when the underlying store fails or times out.

    Transient: callers may retry with backoff.
    """


class ConcurrencyConflictError(StoreError):
    """
    Raised when an update was based on a stale version of the entity.

    Callers should re-fetch before retrying.
    """
