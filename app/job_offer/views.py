"""
JobOffer Views

채용 공고 CRUD API 엔드포인트 (Thin Controller)
"""

import logging

from common.adapters.django_job_offer_repo import SORTABLE_FIELDS
from common.application.result import Err
from common.http_headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
    generate_pagination_headers,
)
from common.serializers import PageRequestSerializer
from django.core.exceptions import ImproperlyConfigured
from django.urls import reverse
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job_offer.application.container import build_save_job_offer_usecase
from job_offer.models import JobOffer
from job_offer.serializers import JobOfferSerializer
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

ENTITY_NAME = "jobOffer"


class JobOfferViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    저장은 생성자로 주입받은 job_offer_repo 에 위임하고,
    HTTP 요청/응답 및 헤더 구성만 담당합니다.

        JobOfferViewSet.as_view({...}, job_offer_repo=repo)
    """

    # 데이터 접근은 job_offer_repo 로만 한다. queryset 은 스키마 생성(pk 타입 추론)용
    queryset = JobOffer.objects.all()
    serializer_class = JobOfferSerializer
    job_offer_repo = None

    def initial(self, request, *args, **kwargs):
        if self.job_offer_repo is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} requires a job_offer_repo"
            )
        super().initial(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성

        POST /api/jobOffers
        """
        logger.debug(f"REST request to save JobOffer : {request.data}")
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        usecase = build_save_job_offer_usecase(self.job_offer_repo)
        result = usecase.create(serializer.to_entity())
        if isinstance(result, Err):
            return Response(
                status=status.HTTP_400_BAD_REQUEST,
                headers=create_failure_alert(ENTITY_NAME, result.message),
            )

        job_offer = result.value
        headers = {
            "Location": reverse("job-offer-detail", kwargs={"pk": job_offer.id}),
            **create_entity_creation_alert(ENTITY_NAME, str(job_offer.id)),
        }
        return Response(
            self.get_serializer(job_offer).data,
            status=status.HTTP_201_CREATED,
            headers=headers,
        )

    def update(self, request, *args, **kwargs):
        """
        채용 공고 수정

        PUT /api/jobOffers

        ID가 없는 payload 는 생성 요청으로 처리합니다 (응답도 생성과 동일).
        """
        logger.debug(f"REST request to update JobOffer : {request.data}")
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        job_offer = serializer.to_entity()
        if job_offer.id is None:
            return self.create(request, *args, **kwargs)

        usecase = build_save_job_offer_usecase(self.job_offer_repo)
        result = usecase.update(job_offer)
        if isinstance(result, Err):
            return Response(
                status=status.HTTP_400_BAD_REQUEST,
                headers=create_failure_alert(ENTITY_NAME, result.message),
            )

        return Response(
            self.get_serializer(result.value).data,
            headers=create_entity_update_alert(ENTITY_NAME, str(job_offer.id)),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="0부터 시작"),
            OpenApiParameter("size", OpenApiTypes.INT),
            OpenApiParameter(
                "sort",
                OpenApiTypes.STR,
                many=True,
                description="property[,asc|desc]",
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회 (페이지)

        GET /api/jobOffers?page=0&size=20&sort=title,desc
        """
        params = PageRequestSerializer(
            data=request.query_params,
            context={"sortable_fields": SORTABLE_FIELDS},
        )
        params.is_valid(raise_exception=True)

        page = self.job_offer_repo.find_all(params.to_page_request())
        serializer = self.get_serializer(page.content, many=True)
        return Response(
            serializer.data,
            headers=generate_pagination_headers(page, request.path),
        )

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 상세 조회

        GET /api/jobOffers/<id>
        """
        logger.debug(f"REST request to get JobOffer : {pk}")
        job_offer = self.job_offer_repo.find_one(int(pk))
        if job_offer is None:
            return Response(status=status.HTTP_404_NOT_FOUND)

        return Response(self.get_serializer(job_offer).data)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 삭제

        DELETE /api/jobOffers/<id>

        존재 여부를 확인하지 않으므로 없는 ID도 200 으로 응답합니다.
        """
        logger.debug(f"REST request to delete JobOffer : {pk}")
        self.job_offer_repo.delete(int(pk))
        return Response(headers=create_entity_deletion_alert(ENTITY_NAME, str(pk)))
