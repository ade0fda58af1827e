from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF 공통 예외 처리기.

    DRF가 아는 예외(ValidationError, NotFound 등)는 기본 처리기에 맡기고,
    그 밖의 예외(저장소 장애 등)는 로그를 남긴 뒤 500으로 응답합니다.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"
    logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)

    set_rollback()
    return Response(
        {"error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
