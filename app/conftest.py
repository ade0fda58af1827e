# app/conftest.py
"""
pytest fixtures for JobOffer API testing
"""
from __future__ import annotations

from typing import Optional

import pytest
from common.application.paging import Page, PageRequest
from job_offer.models import JobOffer
from rest_framework.test import APIClient, APIRequestFactory


class InMemoryJobOfferRepository:
    """
    DB 없이 뷰를 검증하기 위한 JobOfferRepositoryPort 구현.

    호출 기록(saved, deleted)을 남겨 저장소가 호출되었는지 확인할 수 있습니다.
    """

    def __init__(self):
        self.rows: dict[int, JobOffer] = {}
        self.saved: list[JobOffer] = []
        self.deleted: list[int] = []
        self._next_id = 1

    def save(self, job_offer: JobOffer) -> JobOffer:
        if job_offer.id is None:
            job_offer.id = self._next_id
        self._next_id = max(self._next_id, job_offer.id + 1)
        self.rows[job_offer.id] = job_offer
        self.saved.append(job_offer)
        return job_offer

    def find_all(self, page_request: PageRequest) -> Page[JobOffer]:
        rows = sorted(self.rows.values(), key=lambda row: row.id)
        start = page_request.offset
        return Page(
            content=rows[start : start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(rows),
        )

    def find_one(self, job_offer_id: int) -> Optional[JobOffer]:
        return self.rows.get(job_offer_id)

    def delete(self, job_offer_id: int) -> None:
        self.deleted.append(job_offer_id)
        self.rows.pop(job_offer_id, None)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def api_factory():
    return APIRequestFactory()


@pytest.fixture
def job_offer_repo():
    return InMemoryJobOfferRepository()
