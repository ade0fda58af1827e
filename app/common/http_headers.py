"""
HTTP 응답 헤더 헬퍼

- alert 헤더: 엔티티 생성/수정/삭제를 클라이언트에 알리는 헤더 쌍
- pagination 헤더: X-Total-Count 와 Link(next/prev/last/first)
"""

from __future__ import annotations

from common.application.paging import Page
from django.conf import settings

TOTAL_COUNT_HEADER = "X-Total-Count"
LINK_HEADER = "Link"
FAILURE_HEADER = "Failure"


def _header_prefix() -> str:
    return f"X-{getattr(settings, 'APP_NAME', 'jobvacancyApp')}"


def create_alert(message: str, param: str) -> dict[str, str]:
    prefix = _header_prefix()
    return {f"{prefix}-alert": message, f"{prefix}-params": param}


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(
        f"A new {entity_name} is created with identifier {param}", param
    )


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def create_failure_alert(entity_name: str, message: str) -> dict[str, str]:
    prefix = _header_prefix()
    return {
        FAILURE_HEADER: message,
        f"{prefix}-error": message,
        f"{prefix}-params": entity_name,
    }


def _page_link(base_url: str, page: int, size: int, rel: str) -> str:
    return f'<{base_url}?page={page}&size={size}>; rel="{rel}"'


def generate_pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    """
    페이지 결과로부터 X-Total-Count / Link 헤더 생성.

    next/prev 는 해당 페이지가 있을 때만 포함하고, last/first 는 항상 포함합니다.
    """
    links = []
    if page.has_next:
        links.append(_page_link(base_url, page.number + 1, page.size, "next"))
    if page.has_previous:
        links.append(_page_link(base_url, page.number - 1, page.size, "prev"))

    last_page = max(page.total_pages - 1, 0)
    links.append(_page_link(base_url, last_page, page.size, "last"))
    links.append(_page_link(base_url, 0, page.size, "first"))

    return {
        TOTAL_COUNT_HEADER: str(page.total_elements),
        LINK_HEADER: ",".join(links),
    }
