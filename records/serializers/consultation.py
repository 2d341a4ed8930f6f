import html

import bleach
from rest_framework import serializers


def _reference(label):
    return serializers.CharField(
        max_length=32,
        error_messages={
            'required': f'{label} ID is required',
            'null': f'{label} ID is required',
            'blank': f'{label} ID is required',
        },
    )


class ConsultationCreateSerializer(serializers.Serializer):
    patientId = _reference('Patient')
    maladyId = _reference('Malady')
    medicamentId = _reference('Medicament')
    date = serializers.DateTimeField(
        required=False, allow_null=True,
        error_messages={'invalid': 'Date must be an ISO-8601 datetime'},
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=5000)

    def validate_notes(self, v):
        # markup is stripped; bleach escapes &, < and > in the text it keeps,
        # which a JSON response does not need
        return html.unescape(bleach.clean((v or '').strip(), tags=set(), strip=True))
