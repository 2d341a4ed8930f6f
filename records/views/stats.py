from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.services import get_stores
from records.services.stats import collection_counts


@api_view(['GET'])
def stats(request):
    """Number of live records in each collection."""
    return Response(collection_counts(get_stores()))
