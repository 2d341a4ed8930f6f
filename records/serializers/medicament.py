from rest_framework import serializers


class MedicamentCreateSerializer(serializers.Serializer):
    medicamentName = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Medicament name is required',
            'null': 'Medicament name is required',
            'blank': 'Medicament name is required',
        },
    )
    # Presence only here; the service checks the malady exists
    maladyId = serializers.CharField(
        max_length=32,
        error_messages={
            'required': 'Malady ID is required',
            'null': 'Malady ID is required',
            'blank': 'Malady ID is required',
        },
    )
