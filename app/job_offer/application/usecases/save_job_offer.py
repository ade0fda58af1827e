from __future__ import annotations

import logging

from common.application.result import Err, ErrorCode, Ok, Result
from common.ports.job_offer_repo import JobOfferRepositoryPort
from job_offer.models import JobOffer

logger = logging.getLogger(__name__)


class SaveJobOfferUseCase:
    """
    채용 공고 저장 유스케이스.

    - create: ID가 없는 공고만 저장 (ID가 있으면 ID_ALREADY_SET)
    - update: ID가 있는 공고를 저장 (저장소의 upsert 동작을 그대로 따름)
    """

    def __init__(self, *, job_offer_repo: JobOfferRepositoryPort):
        self._job_offer_repo = job_offer_repo

    def create(self, job_offer: JobOffer) -> Result[JobOffer]:
        if job_offer.id is not None:
            return Err(
                code=ErrorCode.ID_ALREADY_SET,
                message="A new jobOffer cannot already have an ID",
                details={"id": job_offer.id},
            )

        saved = self._job_offer_repo.save(job_offer)
        logger.info(f"Created JobOffer {saved.id}")
        return Ok(saved)

    def update(self, job_offer: JobOffer) -> Result[JobOffer]:
        if job_offer.id is None:
            return Err(
                code=ErrorCode.ID_MISSING,
                message="An existing jobOffer must have an ID",
            )

        saved = self._job_offer_repo.save(job_offer)
        logger.info(f"Updated JobOffer {saved.id}")
        return Ok(saved)
