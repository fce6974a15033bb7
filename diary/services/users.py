"""Service helpers for accounts, profile edits and user lookup."""

import logging

from django.conf import settings
from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import AuthenticationFailed

from diary.exceptions import Conflict
from diary.models import Friendship
from diary.repos.user_repo import UserRepo
from diary.services.friendships import FriendshipService

logger = logging.getLogger(__name__)


class UserService:
    """Registration, credential checks and profile reads/writes."""

    def __init__(self, repo=None):
        self.repo = repo or UserRepo()

    @transaction.atomic
    def register(self, username, email, password):
        if self.repo.email_taken(email):
            raise Conflict("A user with this email already exists.")
        if self.repo.username_taken(username):
            raise Conflict("A user with this username already exists.")
        user = self.repo.model.objects.create_user(username=username, email=email, password=password)
        logger.info("Registered user %s", user.pk)
        return user

    def authenticate(self, email, password):
        """Return the active user with these credentials or raise AuthenticationFailed."""
        user = self.repo.queryset().filter(email__iexact=email).first()
        if user is None or not user.check_password(password):
            logger.debug("Failed login for %s", email)
            raise AuthenticationFailed("Invalid email or password.")
        return user

    @transaction.atomic
    def update_profile(self, user, data):
        username = data.get("username")
        if username and username != user.username:
            if self.repo.username_taken(username, exclude_id=user.pk):
                raise Conflict("A user with this username already exists.")
            user.username = username
        for field in ("description", "icon_url"):
            if field in data:
                setattr(user, field, data[field] if data[field] is not None else "")
        if data.get("password"):
            user.set_password(data["password"])
        user.save()
        return user

    def fetch(self, user_id):
        return self.repo.fetch_user(user_id)

    def search(self, viewer, term, limit=None):
        """
        Users whose username contains `term`.

        The viewer and anyone already in a friendship row with them (any
        status, either direction) are left out.
        """
        term = (term or "").strip()
        if not term:
            return []
        if limit is None:
            limit = settings.DIARY["USER_SEARCH_LIMIT"]
        related = Friendship.objects.filter(Q(requester=viewer) | Q(addressee=viewer)).values_list(
            "requester_id", "addressee_id"
        )
        exclude_ids = {viewer.pk}
        for requester_id, addressee_id in related:
            exclude_ids.update((requester_id, addressee_id))
        return list(self.repo.search_by_username(term, exclude_ids=exclude_ids, limit=limit))

    def profile(self, viewer, user_id):
        """Return (user, friendship_status) where the status is relative to the viewer."""
        user = self.fetch(user_id)
        if user.pk == viewer.pk:
            return user, None
        return user, FriendshipService(viewer).status_with(user)
