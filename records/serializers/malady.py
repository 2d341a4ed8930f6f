from rest_framework import serializers


class MaladyCreateSerializer(serializers.Serializer):
    maladyName = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Malady name is required',
            'null': 'Malady name is required',
            'blank': 'Malady name is required',
        },
    )
