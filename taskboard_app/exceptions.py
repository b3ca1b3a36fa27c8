# taskboard_app/exceptions.py
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = 'Internal server error'


def flatten_errors(detail, field=None):
    """
    Turn a DRF error structure into a flat list of field/message pairs.

    Args:
        detail: ValidationError.detail, i.e. a dict, list or ErrorDetail.
        field (str): Dotted path of the field the errors belong to.

    Returns:
        list: [{"field": "name", "message": "Item name is required"}, ...]
    """
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            path = key if field is None else f'{field}.{key}'
            errors.extend(flatten_errors(value, path))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(flatten_errors(item, field))
        return errors
    return [{'field': field or api_settings.NON_FIELD_ERRORS_KEY, 'message': str(detail)}]


def failure_message(context):
    """Pick the generic 500 message the view declares for the request method."""
    view = context.get('view')
    request = context.get('request')
    messages = getattr(view, 'failure_messages', None) or {}
    if request is not None:
        return messages.get(request.method.lower(), DEFAULT_FAILURE_MESSAGE)
    return DEFAULT_FAILURE_MESSAGE


def taskboard_exception_handler(exc, context):
    """
    REST_FRAMEWORK EXCEPTION_HANDLER for the taskboard API.

    - ValidationError -> 400 {"message": "Validation error", "errors": [...]}
    - other API errors (404, 405, parse errors) -> their status, {"message": ...}
    - anything else -> logged, 500 with the view's generic message only
    """
    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {'message': 'Validation error', 'errors': flatten_errors(exc.detail)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(response.data, dict) and 'detail' in response.data:
            response.data = {'message': str(response.data['detail'])}
        return response

    view = context.get('view')
    logger.error('Unhandled error in %s', type(view).__name__, exc_info=exc)
    return Response({'message': failure_message(context)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
