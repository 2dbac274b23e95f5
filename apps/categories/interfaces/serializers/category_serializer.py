"""
Category serializers.
"""
from rest_framework import serializers
from rest_framework.exceptions import ParseError


class StrictCharField(serializers.CharField):
    """CharField that only accepts JSON strings."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            raise ParseError()
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    """BooleanField that only accepts JSON true or false."""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            raise ParseError()
        return data


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    deleted_at = serializers.DateTimeField(read_only=True, allow_null=True)


class CategoryWriteSerializer(serializers.Serializer):
    """
    Serializer for category create/update bodies.

    Missing fields take their zero value; name rules are left to the entity
    so blank names reach domain validation untouched. Values of the wrong
    JSON type are rejected as a malformed body.
    """
    name = StrictCharField(default='', allow_blank=True, trim_whitespace=False)
    description = StrictCharField(default='', allow_blank=True, trim_whitespace=False)
    is_active = StrictBooleanField(default=False)


class CategoryIdSerializer(serializers.Serializer):
    """Serializer for write-operation output."""
    id = serializers.CharField(read_only=True)


class CategoryPageSerializer(serializers.Serializer):
    """Serializer for a page of categories."""
    current_page = serializers.IntegerField(read_only=True)
    per_page = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    items = CategorySerializer(many=True, read_only=True)
