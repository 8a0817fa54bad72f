from django.db import connection
from django.db.utils import OperationalError
from django.http import JsonResponse

from apps.core.exceptions import error_body


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse(
        error_body(code='not_found', message='Not found.'),
        status=404,
    )


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse(
        error_body(code='internal_error', message='Something went wrong!'),
        status=500,
    )


def health_check(request):
    """Liveness probe that also checks the database connection."""
    try:
        connection.ensure_connection()
    except OperationalError:
        return JsonResponse({'success': False, 'status': 'unhealthy', 'database': 'unavailable'}, status=503)
    return JsonResponse({'success': True, 'status': 'ok', 'database': 'ok'})
