"""Response envelope helpers shared by all views."""

from rest_framework import status as http_status
from rest_framework.response import Response

from .pagination import PaginationResult

# Router lookup pattern for UUID primary keys
UUID_PATTERN = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


def success_response(data=None, *, pagination=None, status=http_status.HTTP_200_OK, message=None):
    """
    Wrap ``data`` in the success envelope.

    Returns:
        Response with ``{"success": true, "data": ..., "pagination": ...}``
    """
    body = {'success': True, 'data': data}
    if message:
        body['message'] = message
    if pagination is not None:
        body['pagination'] = pagination.to_dict() if isinstance(pagination, PaginationResult) else pagination
    return Response(body, status=status)


def paginated_response(result: PaginationResult, serializer_class, *, context=None):
    """Serialize one page of results and attach pagination metadata."""
    serializer = serializer_class(result.items, many=True, context=context or {})
    return success_response(serializer.data, pagination=result)
