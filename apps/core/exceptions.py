"""
Error taxonomy shared by every app.

Services raise subclasses of these exceptions; the project-wide DRF
exception handler renders them (and every other API error) as:

    {"success": false, "error": {"code": ..., "message": ..., "details": ...}}

Exception Hierarchy:
    ServiceError (500)
    ├── ValidationFailedError (400)
    ├── UnauthorizedError (401)
    ├── ForbiddenError (403)
    ├── NotFoundError (404)
    └── ConflictError (409)
"""

import logging
import traceback

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(APIException):
    """Base exception for all service errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Something went wrong.'
    default_code = 'internal_error'


class ValidationFailedError(ServiceError):
    """Malformed or out-of-range input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_error'


class UnauthorizedError(ServiceError):
    """Missing or invalid credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Authentication credentials were not provided or are invalid.'
    default_code = 'unauthorized'


class ForbiddenError(ServiceError):
    """Authenticated but lacking role or ownership."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'forbidden'


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class ConflictError(ServiceError):
    """Duplicate unique field or duplicate resource."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class InvalidFilterError(ValidationFailedError):
    """A recognized list filter carries a malformed value."""
    default_detail = 'Invalid filter value.'
    default_code = 'invalid_filter'


# Fallback codes for DRF/Django exceptions that carry no stable code of their own
STATUS_CODES = {
    400: 'validation_error',
    401: 'unauthorized',
    403: 'forbidden',
    404: 'not_found',
    405: 'method_not_allowed',
    409: 'conflict',
    429: 'throttled',
}


def _error_code(exc, status_code):
    if isinstance(exc, ValidationError):
        return 'validation_error'
    if isinstance(exc, APIException):
        codes = exc.get_codes()
        if isinstance(codes, str):
            return codes
    return STATUS_CODES.get(status_code, 'error')


def _error_message(exc):
    if isinstance(exc, ValidationError):
        return 'Invalid input.'
    if isinstance(exc, APIException) and isinstance(exc.detail, str):
        return str(exc.detail)
    if isinstance(exc, Http404):
        return 'Not found.'
    if isinstance(exc, PermissionDenied):
        return ForbiddenError.default_detail
    return str(exc)


def error_body(*, code, message, details=None, exc=None):
    """Build the error envelope."""
    error = {'code': code, 'message': message}
    if details is not None:
        error['details'] = details
    if exc is not None and settings.DEBUG:
        error['stack'] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return {'success': False, 'error': error}


def api_exception_handler(exc, context):
    """
    DRF exception handler rendering every error in the error envelope.

    Known API errors keep their status code. Anything else is logged with
    its traceback and reported as a generic 500.
    """
    if isinstance(exc, DjangoValidationError):
        # model-level validation that escaped a service, e.g. a malformed UUID
        exc = ValidationFailedError('; '.join(exc.messages))

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'view'
        )
        return Response(
            error_body(
                code=ServiceError.default_code,
                message='Something went wrong!',
                exc=exc,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    details = response.data if isinstance(exc, ValidationError) else None
    response.data = error_body(
        code=_error_code(exc, response.status_code),
        message=_error_message(exc),
        details=details,
        exc=exc,
    )
    return response
