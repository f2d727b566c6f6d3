"""Custom permissions for REST API v1."""
from __future__ import annotations

from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsUploaderOrReadOnly(BasePermission):
    """Readers may view and rate content; only the uploader may edit or delete it."""

    message = "Access denied"

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS or getattr(view, "action", None) == "rate":
            return True
        return obj.is_owner(request.user)
