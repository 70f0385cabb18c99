import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe."""
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    logger.error("Internal server error on %s", request.path)
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
