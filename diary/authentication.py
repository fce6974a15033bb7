import logging

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import authentication

from .tokens import decode_token

logger = logging.getLogger(__name__)
User = get_user_model()


class JWTCookieAuthentication(authentication.BaseAuthentication):
    """
    DRF authentication backend reading the signed token from the auth cookie.

    A missing, malformed, expired or orphaned token is not an error here: the
    request simply carries no identity and read endpoints apply the anonymous
    viewer rules. Endpoints that need identity reject it through their
    permission classes, which answer 401 thanks to `authenticate_header`.
    """

    def authenticate(self, request):
        """Return (user, token) for a valid cookie, else None."""
        token = request.COOKIES.get(settings.DIARY["AUTH_COOKIE_NAME"])
        if not token:
            return None

        try:
            user_id = decode_token(token)
        except jwt.InvalidTokenError as exc:
            logger.debug("Ignoring invalid auth token: %s", exc)
            return None

        try:
            user = User.objects.filter(pk=user_id, is_active=True).first()
        except (TypeError, ValueError):
            user = None
        if user is None:
            logger.debug("Auth token refers to unknown user %s", user_id)
            return None
        return (user, token)

    def authenticate_header(self, request):
        return 'Cookie realm="api"'
