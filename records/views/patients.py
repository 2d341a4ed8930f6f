"""
Patient endpoints.

Patients are listed newest first, created with a trimmed name and a
trimmed, lower-cased email, looked up by id and soft deleted.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from records.serializers.patient import PatientCreateSerializer
from records.services import get_stores
from records.services.patients import create_patient, delete_patient, get_patient, list_patients


@api_view(['GET', 'POST'])
def patients(request):
    stores = get_stores()
    if request.method == 'GET':
        data = list_patients(stores)
        return Response({'patients': data, 'count': len(data)})

    s = PatientCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    patient = create_patient(
        stores,
        first_name=s.validated_data['firstName'],
        last_name=s.validated_data['lastName'],
        email=s.validated_data['email'],
    )
    return Response({'patient': patient}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
def patient_detail(request, pk):
    stores = get_stores()
    if request.method == 'GET':
        return Response({'patient': get_patient(stores, pk)})
    delete_patient(stores, pk)
    return Response({'message': 'Patient deleted successfully'})
