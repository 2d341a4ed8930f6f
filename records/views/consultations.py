"""
Consultation endpoints.

Every consultation returned here has its patient, malady and medicament
references replaced by their display fields.  Consultations cannot be
edited; deleting one echoes the deleted record back.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.serializers.consultation import ConsultationCreateSerializer
from records.services import get_stores
from records.services.consultations import (
    create_consultation, delete_consultation, get_consultation, list_consultations,
)


@api_view(['GET', 'POST'])
def consultations(request):
    stores = get_stores()
    if request.method == 'GET':
        data = list_consultations(stores)
        return Response({'consultations': data, 'count': len(data)})

    s = ConsultationCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    consultation = create_consultation(
        stores,
        patient_id=s.validated_data['patientId'],
        malady_id=s.validated_data['maladyId'],
        medicament_id=s.validated_data['medicamentId'],
        date=s.validated_data.get('date'),
        notes=s.validated_data.get('notes') or '',
    )
    return Response({'consultation': consultation}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
def consultations_for_patient(request, patient_id):
    data = list_consultations(get_stores(), patient_id=patient_id)
    return Response({'consultations': data, 'count': len(data)})


@api_view(['GET', 'DELETE'])
def consultation_detail(request, pk):
    stores = get_stores()
    if request.method == 'GET':
        return Response({'consultation': get_consultation(stores, pk)})
    consultation = delete_consultation(stores, pk)
    return Response({'message': 'Consultation deleted successfully', 'consultation': consultation})
