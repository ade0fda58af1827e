from __future__ import annotations

import logging
import uuid
from typing import Callable

from common.request_id import reset_request_id, set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성(또는 X-Request-ID 헤더 값을 재사용)하고
    - 요청 처리 동안 contextvar 에 보관한 뒤
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = (request.META.get(self.header_name) or "").strip()
        request_id = incoming or uuid.uuid4().hex

        request.request_id = request_id  # type: ignore[attr-defined]
        token = set_request_id(request_id)
        try:
            response = self.get_response(request)
            logger.debug(
                f"{request.method} {request.path} -> {response.status_code}"
            )
        finally:
            reset_request_id(token)

        response[self.response_header] = request_id
        return response
