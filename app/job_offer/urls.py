from django.urls import path
from job_offer.application.container import build_job_offer_repository
from job_offer.views import JobOfferViewSet

job_offer_repo = build_job_offer_repository()

job_offer_list = JobOfferViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"},
    job_offer_repo=job_offer_repo,
)
job_offer_detail = JobOfferViewSet.as_view(
    {"get": "retrieve", "delete": "destroy"},
    job_offer_repo=job_offer_repo,
)

urlpatterns = [
    path("jobOffers", job_offer_list, name="job-offer-list"),
    path("jobOffers/<int:pk>", job_offer_detail, name="job-offer-detail"),
]
