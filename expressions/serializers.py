from django.conf import settings
from rest_framework import serializers

from .utils import json_safe


class CompileDocumentSerializer(serializers.Serializer):
    """Input serializer for compiling a document."""
    document = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def validate_document(self, value):
        max_length = getattr(settings, "LINECALC_MAX_DOCUMENT_LENGTH", 100000)
        if len(value) > max_length:
            raise serializers.ValidationError(
                f"document must not exceed {max_length} characters"
            )
        return value


class LineResultSerializer(serializers.Serializer):
    """Serializer for the compiled and evaluated result of one line."""
    line = serializers.IntegerField()
    type = serializers.CharField()
    tree = serializers.CharField()
    value = serializers.SerializerMethodField()

    def get_value(self, obj):
        return json_safe(obj["value"])
