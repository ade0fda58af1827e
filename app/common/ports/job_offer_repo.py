from __future__ import annotations

from typing import Optional, Protocol

from common.application.paging import Page, PageRequest
from job_offer.models import JobOffer


class JobOfferRepositoryPort(Protocol):
    def save(self, job_offer: JobOffer) -> JobOffer: ...

    def find_all(self, page_request: PageRequest) -> Page[JobOffer]: ...

    def find_one(self, job_offer_id: int) -> Optional[JobOffer]: ...

    def delete(self, job_offer_id: int) -> None: ...
