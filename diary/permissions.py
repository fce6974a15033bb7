from rest_framework import permissions

from diary.exceptions import AuthenticationRequired


class IsSignedIn(permissions.BasePermission):
    """Allow signed-in users; everyone else gets AuthenticationRequired (401)."""

    def has_permission(self, request, view):
        if request.user and request.user.is_authenticated:
            return True
        raise AuthenticationRequired()


class IsSignedInOrReadOnly(IsSignedIn):
    """Reads are open, writes need a signed-in user."""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
