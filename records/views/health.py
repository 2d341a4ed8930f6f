import logging

from django.db import DatabaseError, connections
from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response

logger = logging.getLogger(__name__)


@api_view(['GET'])
def health(request):
    """Liveness probe; always 200, the database state is reported, not enforced."""
    db_ok = False
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        db_ok = bool(row and row[0] == 1)
    except DatabaseError as e:
        logger.warning('Health check database probe failed: %s', e)
    return Response({
        'status': 'OK',
        'message': 'PharmaX Server is running',
        'timestamp': timezone.now().isoformat(),
        'database': 'connected' if db_ok else 'disconnected',
    })
