from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.serializers.medicament import MedicamentCreateSerializer
from records.services import get_stores
from records.services.medicaments import (
    create_medicament, delete_medicament, get_medicament, list_medicaments,
)


@api_view(['GET', 'POST'])
def medicaments(request):
    stores = get_stores()
    if request.method == 'GET':
        data = list_medicaments(stores)
        return Response({'medicaments': data, 'count': len(data)})

    s = MedicamentCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    medicament = create_medicament(
        stores,
        medicament_name=s.validated_data['medicamentName'],
        malady_id=s.validated_data['maladyId'],
    )
    return Response({'medicament': medicament}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def medicaments_for_malady(request, malady_id):
    data = list_medicaments(get_stores(), malady_id=malady_id)
    return Response({'medicaments': data, 'count': len(data)})


@api_view(['GET', 'DELETE'])
def medicament_detail(request, pk):
    stores = get_stores()
    if request.method == 'GET':
        return Response({'medicament': get_medicament(stores, pk)})
    delete_medicament(stores, pk)
    return Response({'message': 'Medicament deleted successfully'})
