"""Shared utilities."""

from zoho_oauth2.utils.json_serializers import json_serializer

__all__ = ["json_serializer"]
