# lab_core/results/api/serializers.py
from __future__ import annotations

from typing import Any
from uuid import UUID

from rest_framework import serializers

from lab_core.results.criteria import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_NUM, ResultCriteria
from lab_core.results.document import SAMPLE_TYPE
from lab_core.results.filters import day_key
from lab_core.results.models import Result


# ----------------------------
# Path params
# ----------------------------
class OrganisationPathSerializer(serializers.Serializer):
    org = serializers.UUIDField(error_messages={"invalid": "org is not valid"})


class ProfilePathSerializer(OrganisationPathSerializer):
    profileId = serializers.UUIDField(error_messages={"invalid": "profileId is not valid"})


class ProfileResultPathSerializer(ProfilePathSerializer):
    sampleId = serializers.CharField(max_length=64, error_messages={"blank": "sampleId is not valid"})


# ----------------------------
# List query
# ----------------------------
class ResultListQuerySerializer(serializers.Serializer):
    pageNum = serializers.IntegerField(min_value=1, required=False)
    pageLimit = serializers.IntegerField(min_value=1, required=False)
    activateDate = serializers.CharField(required=False, allow_blank=True)
    resultDate = serializers.CharField(required=False, allow_blank=True)
    patientName = serializers.CharField(required=False, allow_blank=True)
    patientId = serializers.CharField(required=False, allow_blank=True)

    def _validate_day(self, value: str, field_name: str) -> str:
        if value and day_key(value) is None:
            raise serializers.ValidationError(f"{field_name} is not a valid date. Use MM/DD/YYYY or ISO-8601.")
        return value

    def validate_activateDate(self, value):
        return self._validate_day(value, "activateDate")

    def validate_resultDate(self, value):
        return self._validate_day(value, "resultDate")

    def validate_patientId(self, value):
        # profile ids are emitted as canonical lowercase UUIDs
        try:
            return str(UUID(value.strip()))
        except ValueError:
            return value

    def to_criteria(self, *, default_page_limit: int = DEFAULT_PAGE_LIMIT) -> ResultCriteria:
        v = self.validated_data
        return ResultCriteria(
            patient_name=v.get("patientName") or None,
            activate_date=v.get("activateDate") or None,
            result_date=v.get("resultDate") or None,
            patient_id=v.get("patientId") or None,
            page_num=v.get("pageNum") or DEFAULT_PAGE_NUM,
            page_limit=v.get("pageLimit") or default_page_limit,
        )


# ----------------------------
# Create body: {"data": {"type": "sample", "attributes": {...}}}
# ----------------------------
class ResultCreateAttributesSerializer(serializers.Serializer):
    sampleId = serializers.CharField(max_length=64, error_messages={"blank": "sampleId is not valid"})
    resultType = serializers.CharField(max_length=64, error_messages={"blank": "resultType is not valid"})


class ResultCreateDataSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[SAMPLE_TYPE], error_messages={"invalid_choice": "type is not valid"})
    attributes = ResultCreateAttributesSerializer()


class ResultCreateSerializer(serializers.Serializer):
    data = ResultCreateDataSerializer()


# ----------------------------
# Output
# ----------------------------
class ResultAttributesSerializer(serializers.Serializer):
    result = serializers.JSONField(allow_null=True)
    sampleId = serializers.CharField(source="sample_id")
    resultType = serializers.CharField(source="result_type")
    activateTime = serializers.DateTimeField(source="activate_time")
    resultTime = serializers.DateTimeField(source="result_time", allow_null=True)


class CreatedResultAttributesSerializer(serializers.Serializer):
    sampleId = serializers.CharField(source="sample_id")
    resultType = serializers.CharField(source="result_type")
    activateTime = serializers.DateTimeField(source="activate_time")


def sample_resource(result: Result, attributes_serializer=ResultAttributesSerializer) -> dict[str, Any]:
    return {
        "data": {
            "id": str(result.id),
            "type": SAMPLE_TYPE,
            "attributes": attributes_serializer(result).data,
        }
    }
