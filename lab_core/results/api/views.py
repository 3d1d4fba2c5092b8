# lab_core/results/api/views.py
from __future__ import annotations

import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from lab_core.common.api.exceptions import message_response
from lab_core.organisations.selectors import get_organisation_or_none
from lab_core.results import conf
from lab_core.results.api.serializers import (
    CreatedResultAttributesSerializer,
    OrganisationPathSerializer,
    ProfilePathSerializer,
    ProfileResultPathSerializer,
    ResultCreateSerializer,
    ResultListQuerySerializer,
    sample_resource,
)
from lab_core.results.filters import apply_filters
from lab_core.results.pagination import paginate
from lab_core.results.search import search_results
from lab_core.results.selectors import get_profile_result_or_none
from lab_core.results.services import ResultService

logger = logging.getLogger(__name__)

SOMETHING_WENT_WRONG = "Something went wrong"

LIST_PARAMETERS = [
    OpenApiParameter(name="pageNum", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY, required=False, description="1-based page number (default 1)."),
    OpenApiParameter(name="pageLimit", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY, required=False, description="Page size (default 5)."),
    OpenApiParameter(name="activateDate", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False, description="MM/DD/YYYY; matched by calendar day."),
    OpenApiParameter(name="resultDate", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False, description="MM/DD/YYYY; matched by calendar day."),
    OpenApiParameter(name="patientName", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False, description="Exact profile name; first matching profile wins."),
    OpenApiParameter(name="patientId", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
    OpenApiParameter(name="sampleId", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
    OpenApiParameter(name="resultType", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
]


def _validated_path(serializer_class, kwargs):
    ser = serializer_class(data=kwargs)
    ser.is_valid(raise_exception=True)
    return ser.validated_data


class OrganisationResultListView(APIView):
    """
    /organisations/<org>/results/
    search -> filter -> paginate
    """

    @extend_schema(
        tags=["Results"],
        operation_id="v1_organisation_results_list",
        parameters=LIST_PARAMETERS,
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request, org: str):
        path = _validated_path(OrganisationPathSerializer, {"org": org})

        query = ResultListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        criteria = query.to_criteria(default_page_limit=conf.default_page_limit())

        try:
            organisation = get_organisation_or_none(organisation_id=path["org"])
            if organisation is None:
                return message_response("Organisation not found", http_status=status.HTTP_404_NOT_FOUND)

            document = search_results(organisation=organisation, params=request.query_params)
            document = apply_filters(document, criteria, narrowing=conf.included_narrowing())
            page = paginate(document, criteria.page_num, criteria.page_limit)
        except DRFValidationError:
            raise
        except Exception as e:
            logger.exception("Listing results for organisation %s failed", org)
            return message_response(SOMETHING_WENT_WRONG, http_status=status.HTTP_500_INTERNAL_SERVER_ERROR, err=str(e))

        return Response(page.to_json(), status=status.HTTP_200_OK)


class ProfileResultCollectionView(APIView):
    """
    /organisations/<org>/profiles/<profileId>/results/
    """

    @extend_schema(
        tags=["Results"],
        operation_id="v1_profile_results_create",
        request=ResultCreateSerializer,
        responses={201: OpenApiTypes.OBJECT},
    )
    def post(self, request, org: str, profile_id: str):
        path = _validated_path(ProfilePathSerializer, {"org": org, "profileId": profile_id})

        ser = ResultCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        attrs = ser.validated_data["data"]["attributes"]

        try:
            result = ResultService.create_result(
                organisation_id=path["org"],
                profile_id=path["profileId"],
                sample_id=attrs["sampleId"],
                result_type=attrs["resultType"],
            )
        except ResultService.ProfileNotFound:
            return message_response("Profile not found", http_status=status.HTTP_404_NOT_FOUND)
        except ResultService.DuplicateSample as e:
            raise DRFValidationError({"sampleId": [str(e)]})
        except Exception:
            logger.exception("Creating result for profile %s failed", profile_id)
            return message_response(SOMETHING_WENT_WRONG, http_status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(sample_resource(result, CreatedResultAttributesSerializer), status=status.HTTP_201_CREATED)


class ProfileResultDetailView(APIView):
    """
    /organisations/<org>/profiles/<profileId>/results/<sampleId>/
    """

    @extend_schema(
        tags=["Results"],
        operation_id="v1_profile_results_retrieve",
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request, org: str, profile_id: str, sample_id: str):
        path = _validated_path(
            ProfileResultPathSerializer,
            {"org": org, "profileId": profile_id, "sampleId": sample_id},
        )

        try:
            result = get_profile_result_or_none(
                organisation_id=path["org"],
                profile_id=path["profileId"],
                sample_id=path["sampleId"],
            )
        except Exception:
            logger.exception("Loading result %s for profile %s failed", sample_id, profile_id)
            return message_response(SOMETHING_WENT_WRONG, http_status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if result is None:
            return message_response("Result not found", http_status=status.HTTP_404_NOT_FOUND)

        return Response(sample_resource(result), status=status.HTTP_200_OK)
