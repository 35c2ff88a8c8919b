from __future__ import annotations

from typing import Optional

from common.request_context import get_user_id


class ContextVarUserContext:
    """RequestContextMiddleware 가 요청당 한 번 저장한 사용자 id 를 읽습니다."""

    def current_user_id(self) -> Optional[str]:
        return get_user_id()


class FixedUserContext:
    """메시지 컨슈머/관리 명령처럼 요청 밖에서 호출자를 명시할 때 사용합니다."""

    def __init__(self, user_id: Optional[str]):
        self._user_id = user_id

    def current_user_id(self) -> Optional[str]:
        return self._user_id
