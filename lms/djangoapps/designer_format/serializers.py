"""
Serializers of the designer format API.
"""

from rest_framework import serializers


class SectionOptionSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """A single section option to store"""

    name = serializers.CharField(max_length=255)
    value = serializers.CharField(allow_blank=True, allow_null=True, trim_whitespace=False)


class SectionOptionsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """Payload of the set section options endpoint"""

    options = SectionOptionSerializer(many=True)
