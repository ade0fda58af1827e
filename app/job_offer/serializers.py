from job_offer.models import JobOffer
from rest_framework import serializers

# BigAutoField 범위
MAX_JOB_OFFER_ID = 9223372036854775807


class JobOfferSerializer(serializers.ModelSerializer):
    # 생성 요청에서 ID 존재 여부를 확인해야 하므로 쓰기 가능하게 선언
    id = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=-MAX_JOB_OFFER_ID - 1,
        max_value=MAX_JOB_OFFER_ID,
    )

    class Meta:
        model = JobOffer
        fields = [
            "id",
            "title",
            "location",
            "description",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]

    def validate_id(self, value):
        # 생성 요청은 어떤 ID든 유스케이스에서 Failure 로 거절한다
        view = self.context.get("view")
        if value is None or getattr(view, "action", None) == "create":
            return value
        if value < 1:
            raise serializers.ValidationError(
                "Ensure this value is greater than or equal to 1."
            )
        return value

    def to_entity(self) -> JobOffer:
        """검증된 payload 로 저장 전 JobOffer 인스턴스를 만든다."""
        return JobOffer(**self.validated_data)
