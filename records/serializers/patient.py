import re

from rest_framework import serializers

# word runs joined by single dots/dashes, an @, a dotted domain; the
# separator inside each group is mandatory so matching stays linear
EMAIL_RE = re.compile(r'^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,}$')


class PatientCreateSerializer(serializers.Serializer):
    firstName = serializers.CharField(
        max_length=100, min_length=2,
        error_messages={
            'required': 'First name is required',
            'null': 'First name is required',
            'blank': 'First name is required',
            'min_length': 'First name must be at least 2 characters',
            'max_length': 'First name must be at most 100 characters',
        },
    )
    lastName = serializers.CharField(
        max_length=100, min_length=2,
        error_messages={
            'required': 'Last name is required',
            'null': 'Last name is required',
            'blank': 'Last name is required',
            'min_length': 'Last name must be at least 2 characters',
            'max_length': 'Last name must be at most 100 characters',
        },
    )
    email = serializers.CharField(
        max_length=254,
        error_messages={
            'required': 'Email is required',
            'null': 'Email is required',
            'blank': 'Email is required',
            'max_length': 'Please enter a valid email',
        },
    )

    def validate_email(self, v):
        v = v.strip().lower()
        if not EMAIL_RE.match(v):
            raise serializers.ValidationError('Please enter a valid email')
        return v
