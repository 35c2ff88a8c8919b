from __future__ import annotations

from contextvars import ContextVar
from typing import Optional

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_user_id: ContextVar[Optional[str]] = ContextVar("user_id", default=None)


def get_request_id() -> str:
    return _request_id.get() or "-"


def set_request_id(request_id: Optional[str]) -> None:
    _request_id.set(request_id)


def get_user_id() -> Optional[str]:
    return _user_id.get()


def set_user_id(user_id: Optional[str]) -> None:
    _user_id.set(user_id)


def clear() -> None:
    _request_id.set(None)
    _user_id.set(None)
