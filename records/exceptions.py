import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class DuplicateKey(APIException):
    """A unique constraint (patient email, malady name) was violated."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Record already exists'
    default_code = 'duplicate_key'


class NotFound(APIException):
    """No undeleted record matches the requested id."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Record not found'
    default_code = 'not_found'


class StorageUnavailable(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Storage unavailable'
    default_code = 'storage_unavailable'


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        # field errors in declaration order, then non_field_errors
        for key, value in detail.items():
            if key != api_settings.NON_FIELD_ERRORS_KEY:
                return _first_message(value)
        if api_settings.NON_FIELD_ERRORS_KEY in detail:
            return _first_message(detail[api_settings.NON_FIELD_ERRORS_KEY])
        return 'Invalid request'
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else 'Invalid request'
    return str(detail)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('Unhandled error in %s', view.__class__.__name__ if view else 'view', exc_info=exc)
        return Response({'error': 'Internal server error'}, status=500)
    # normalize response
    return Response({'error': _first_message(resp.data)}, status=resp.status_code, headers=_headers(resp))


def _headers(resp) -> dict:
    return {k: v for k, v in resp.items() if k in ('Allow', 'Retry-After', 'WWW-Authenticate')}
