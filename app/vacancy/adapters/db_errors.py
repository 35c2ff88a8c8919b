from __future__ import annotations

import logging
from contextlib import contextmanager

from common.exceptions import StoreUnavailableError
from django.db import DatabaseError, IntegrityError

logger = logging.getLogger(__name__)


@contextmanager
def translate_db_errors(operation: str):
    """
    ORM 호출 중 발생한 일시적 DB 오류(연결 끊김, 타임아웃 등)를 StoreUnavailableError 로 바꿉니다.
    무결성 오류는 호출 코드의 버그이므로 그대로 전파합니다.
    """
    try:
        yield
    except IntegrityError:
        raise
    except DatabaseError as e:
        logger.warning("entity_store_unavailable operation=%s reason=%s", operation, e)
        raise StoreUnavailableError(f"{operation} failed") from e
