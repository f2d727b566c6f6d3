"""Project-wide DRF exception handler.

Maps domain errors that are not DRF exceptions onto HTTP responses:
Django `ValidationError` -> 400, study aid generator errors -> 503/502,
and store-level failures -> a generic 500 that is logged, not leaked.
"""
from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error
from rest_framework.views import exception_handler

from studyaids.generators import GenerationFailed, GeneratorUnavailable

logger = logging.getLogger(__name__)


class StudyAidsUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Study aid generation is unavailable."
    default_code = "generator_unavailable"


class StudyAidsFailed(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Study aid generation failed."
    default_code = "generation_failed"


def api_exception_handler(exc, context):
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail=as_serializer_error(exc))
    elif isinstance(exc, GeneratorUnavailable):
        exc = StudyAidsUnavailable(str(exc) or None)
    elif isinstance(exc, GenerationFailed):
        exc = StudyAidsFailed(str(exc) or None)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("store failure in %s", type(view).__name__ if view else "unknown view", exc_info=exc)
        return Response({"detail": "A server error occurred."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return None
