"""Mapping of domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Responses carry the error
code and its user-safe message, never internal details.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ticketing.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_BELOW_SOLD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )
    return exception_handler(exc, context)
