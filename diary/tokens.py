"""Signed, time-limited auth tokens carried in the auth cookie.

HS256 with `settings.JWT_SECRET`. The subject lives in the `userId` claim.
"""

import time

import jwt
from django.conf import settings

ALGORITHM = "HS256"


def _lifetime():
    return settings.DIARY["JWT_LIFETIME_SECONDS"]


def issue_token(user, lifetime=None):
    """Encode a token for `user` that expires after `lifetime` seconds."""
    now = int(time.time())
    payload = {
        "userId": str(user.pk),
        "iat": now,
        "exp": now + (lifetime if lifetime is not None else _lifetime()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token):
    """Return the token's user id.

    Raises jwt.InvalidTokenError subclasses on a bad signature, an expired
    token or a missing subject.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[ALGORITHM],
        options={"require": ["exp", "iat"]},
    )
    user_id = payload.get("userId")
    if not user_id:
        raise jwt.InvalidTokenError("missing_claim:userId")
    return user_id


def set_auth_cookie(response, token):
    diary = settings.DIARY
    response.set_cookie(
        diary["AUTH_COOKIE_NAME"],
        token,
        max_age=diary["JWT_LIFETIME_SECONDS"],
        httponly=True,
        secure=diary["AUTH_COOKIE_SECURE"],
        samesite="Lax",
        path="/",
    )
    return response


def clear_auth_cookie(response):
    response.delete_cookie(settings.DIARY["AUTH_COOKIE_NAME"], path="/", samesite="Lax")
    return response
