"""
Custom exception handlers for DRF.

Errors are answered as plain text carrying the raw message. Domain errors
map to 400 unless the view declares another status for the request method
in ``domain_error_statuses``.
"""
import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError as SerializerValidationError
from rest_framework.views import exception_handler

from shared.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPE = 'text/plain; charset=utf-8'


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    request = context.get('request')

    if isinstance(exc, DomainException):
        status_code = _domain_error_status(context.get('view'), request)
        logger.warning(f"{exc.code} on {request.method} {request.path}: {exc.message}")
        return text_response(exc.message, status_code)

    if isinstance(exc, ParseError):
        return text_response('invalid request body', status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, SerializerValidationError):
        return text_response(_flatten_detail(exc.detail), status.HTTP_400_BAD_REQUEST)

    # Call REST framework's default exception handler for everything else
    return exception_handler(exc, context)


def text_response(message: str, status_code: int) -> HttpResponse:
    """Plain-text error body."""
    return HttpResponse(message, status=status_code, content_type=TEXT_CONTENT_TYPE)


def _domain_error_status(view, request) -> int:
    overrides = getattr(view, 'domain_error_statuses', None) or {}
    return overrides.get(request.method, status.HTTP_400_BAD_REQUEST)


def _flatten_detail(detail, prefix: str = '') -> str:
    """Join nested serializer errors into one line per message."""
    if isinstance(detail, dict):
        lines = [
            _flatten_detail(value, f"{prefix}{key}: " if key != 'non_field_errors' else prefix)
            for key, value in detail.items()
        ]
        return "\n".join(lines)
    if isinstance(detail, list):
        return "\n".join(_flatten_detail(item, prefix) for item in detail)
    return f"{prefix}{detail}"
