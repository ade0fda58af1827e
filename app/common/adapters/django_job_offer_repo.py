from __future__ import annotations

from typing import Optional

from common.application.paging import Page, PageRequest
from django.core.paginator import EmptyPage, Paginator
from job_offer.models import JobOffer

SORTABLE_FIELDS = ("id", "title", "location", "created_at", "updated_at")


class DjangoJobOfferRepository:
    def save(self, job_offer: JobOffer) -> JobOffer:
        # 기존 row 를 덮어쓸 때 created_at 은 유지
        if job_offer.pk is not None and job_offer.created_at is None:
            job_offer.created_at = (
                JobOffer.objects.filter(pk=job_offer.pk)
                .values_list("created_at", flat=True)
                .first()
            )
        job_offer.save()
        job_offer.refresh_from_db()
        return job_offer

    def find_all(self, page_request: PageRequest) -> Page[JobOffer]:
        queryset = JobOffer.objects.order_by(*_ordering(page_request))
        paginator = Paginator(queryset, page_request.size)
        try:
            content = list(paginator.page(page_request.page + 1).object_list)
        except EmptyPage:
            content = []

        return Page(
            content=content,
            number=page_request.page,
            size=page_request.size,
            total_elements=paginator.count,
        )

    def find_one(self, job_offer_id: int) -> Optional[JobOffer]:
        return JobOffer.objects.filter(pk=job_offer_id).first()

    def delete(self, job_offer_id: int) -> None:
        JobOffer.objects.filter(pk=job_offer_id).delete()


def _ordering(page_request: PageRequest) -> list[str]:
    ordering = [
        f"-{order.field_name}" if order.is_descending else order.field_name
        for order in page_request.sort
        if order.field_name in SORTABLE_FIELDS
    ]
    # 같은 값이 많아도 페이지 경계가 흔들리지 않도록 id 를 마지막 기준으로
    if not any(key.lstrip("-") == "id" for key in ordering):
        ordering.append("id")
    return ordering
