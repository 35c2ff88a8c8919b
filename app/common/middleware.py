from __future__ import annotations

import uuid
from typing import Callable

from common import request_context
from django.http import HttpRequest, HttpResponse


class RequestContextMiddleware:
    """
    - 요청마다 request_id를 생성/전파하고
    - 인증된 사용자 id를 요청당 한 번만 해석해 contextvar 에 저장하며
    - response에 X-Request-ID 헤더를 포함합니다.

    AuthenticationMiddleware 뒤에 위치해야 request.user 를 읽을 수 있습니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.META.get(self.header_name)
        request_id = str(incoming).strip() if incoming else str(uuid.uuid4())

        request.request_id = request_id  # type: ignore[attr-defined]
        request_context.set_request_id(request_id)
        request_context.set_user_id(_resolve_user_id(request))

        try:
            response = self.get_response(request)
        finally:
            request_context.clear()
        response[self.response_header] = request_id
        return response


def _resolve_user_id(request: HttpRequest) -> str | None:
    user = getattr(request, "user", None)
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return str(user.pk)
