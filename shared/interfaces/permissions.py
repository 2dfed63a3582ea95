"""
Permission classes shared by admin endpoints.
"""
from rest_framework.permissions import BasePermission


class IsTaxonomyAdmin(BasePermission):
    """Authenticated staff users only."""
    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)


def actor_id(request):
    """Identity recorded in audit fields."""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    return str(user.pk)
