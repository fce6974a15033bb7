import uuid
from datetime import datetime

from django.conf import settings
from django.utils import timezone
from rest_framework.test import APIClient

from diary.models import DiaryEntry, Friendship, FriendshipStatus, PrivacyLevel, User
from diary.tokens import issue_token


def make_user(**kwargs):
    username = kwargs.pop("username", f"user_{uuid.uuid4().hex[:8]}")
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(username=username, email=email, password=password, **kwargs)


def local_datetime(year=2024, month=5, day=1, hour=12, minute=0):
    """An aware datetime in the project's time zone."""
    return datetime(year, month, day, hour, minute, tzinfo=timezone.get_current_timezone())


def make_entry(*, user=None, title="Heron by the river", privacy_level=PrivacyLevel.PUBLIC, **extra):
    if user is None:
        user = make_user()
    extra.setdefault("description", "Standing very still in the shallows.")
    extra.setdefault("latitude", 35.68)
    extra.setdefault("longitude", 139.76)
    extra.setdefault("taken_at", local_datetime())
    return DiaryEntry.objects.create(user=user, title=title, privacy_level=privacy_level, **extra)


def make_friendship(requester, addressee, status=FriendshipStatus.ACCEPTED):
    return Friendship.objects.create(requester=requester, addressee=addressee, status=status)


def api_client(user=None):
    """APIClient authenticated through the auth cookie, or anonymous when user is None."""
    client = APIClient()
    if user is not None:
        client.cookies[settings.DIARY["AUTH_COOKIE_NAME"]] = issue_token(user)
    return client
