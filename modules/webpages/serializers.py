"""
Webpages module serializers.
"""
from rest_framework import serializers

from .models import PageModel


class PageSerializer(serializers.ModelSerializer):
    """Serializer for page output."""
    full_path = serializers.CharField(read_only=True)
    root_slug = serializers.CharField(source='get_root_slug', read_only=True, allow_null=True)

    class Meta:
        model = PageModel
        fields = [
            'id',
            'title',
            'slug',
            'parent',
            'full_path',
            'root_slug',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

