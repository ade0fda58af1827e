from __future__ import annotations

from common.adapters.django_job_offer_repo import DjangoJobOfferRepository
from common.ports.job_offer_repo import JobOfferRepositoryPort
from job_offer.application.usecases.save_job_offer import SaveJobOfferUseCase


def build_job_offer_repository() -> JobOfferRepositoryPort:
    """
    JobOffer 저장소 조립(Dependency Injection).
    """
    return DjangoJobOfferRepository()


def build_save_job_offer_usecase(
    job_offer_repo: JobOfferRepositoryPort,
) -> SaveJobOfferUseCase:
    return SaveJobOfferUseCase(job_offer_repo=job_offer_repo)
