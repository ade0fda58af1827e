from __future__ import annotations

from common.application.paging import ASC, DESC, PageRequest, SortOrder
from django.conf import settings
from rest_framework import serializers


class PageRequestSerializer(serializers.Serializer):
    """
    목록 조회 쿼리 파라미터 검증.

    - page: 0부터 시작하는 페이지 번호
    - size: 페이지 크기 (PAGINATION_MAX_PAGE_SIZE 이하)
    - sort: "property[,asc|desc]" 형식, 여러 번 지정 가능

    context["sortable_fields"] 에 정렬 가능한 필드 목록을 넘깁니다.
    """

    page = serializers.IntegerField(required=False, min_value=0, default=0)
    size = serializers.IntegerField(required=False, min_value=1)
    sort = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )

    def validate_size(self, value):
        max_size = getattr(settings, "PAGINATION_MAX_PAGE_SIZE", 2000)
        if value > max_size:
            raise serializers.ValidationError(
                f"Ensure this value is less than or equal to {max_size}."
            )
        return value

    def validate_sort(self, value):
        sortable = set(self.context.get("sortable_fields", ()))
        orders: list[SortOrder] = []
        for expression in value:
            parts = [part.strip() for part in expression.split(",") if part.strip()]
            direction = ASC
            if parts and parts[-1].lower() in (ASC, DESC):
                direction = parts.pop().lower()
            for prop in parts:
                if prop not in sortable:
                    raise serializers.ValidationError(
                        f"Unknown sort property: {prop}"
                    )
                orders.append(SortOrder(field_name=prop, direction=direction))
        return orders

    def to_page_request(self) -> PageRequest:
        data = self.validated_data
        size = data.get("size") or getattr(settings, "PAGINATION_DEFAULT_PAGE_SIZE", 20)
        return PageRequest(
            page=data.get("page", 0),
            size=size,
            sort=tuple(data.get("sort", ())),
        )
