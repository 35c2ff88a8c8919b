from __future__ import annotations

import logging

from common.request_context import get_request_id, get_user_id


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s / %(user_id)s 를 안전하게 쓰도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        record.user_id = get_user_id() or "-"  # type: ignore[attr-defined]
        return True
