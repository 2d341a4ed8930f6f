"""
Malady endpoints.

Deleting a malady also removes the medicaments attached to it.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.serializers.malady import MaladyCreateSerializer
from records.services import get_stores
from records.services.maladies import create_malady, delete_malady, get_malady, list_maladies


@api_view(['GET', 'POST'])
def maladies(request):
    stores = get_stores()
    if request.method == 'GET':
        data = list_maladies(stores)
        return Response({'maladies': data, 'count': len(data)})

    s = MaladyCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    malady = create_malady(stores, malady_name=s.validated_data['maladyName'])
    return Response({'malady': malady}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
def malady_detail(request, pk):
    stores = get_stores()
    if request.method == 'GET':
        return Response({'malady': get_malady(stores, pk)})
    removed = delete_malady(stores, pk)
    return Response({
        'message': 'Malady and associated medicaments deleted successfully',
        'deletedMedicaments': removed,
    })
