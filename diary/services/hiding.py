"""Service helpers for hiding entries and users from a viewer's listings."""

import logging

from rest_framework.exceptions import ValidationError

from diary.db_accessor import DB_Accessor
from diary.exceptions import AuthorizationDenied
from diary.models import HiddenEntry, HiddenUser
from diary.repos.user_repo import UserRepo
from diary.services.diary_entries import DiaryEntryService

logger = logging.getLogger(__name__)


class HidingService:
    """Per-user suppression lists. Hiding the same thing twice returns the existing row."""

    def __init__(self, user, entries=None):
        self.user = user
        self.entries = entries or DiaryEntryService()
        self.hidden_entries = DB_Accessor(HiddenEntry)
        self.hidden_users = DB_Accessor(HiddenUser)

    def list_hidden_entries(self):
        return self.hidden_entries.list(
            filters={"user": self.user},
            order_by=("-created_at",),
            queryset=HiddenEntry.objects.select_related("user", "diary_entry"),
        )

    def hide_entry(self, entry_id):
        """Return (hidden_entry, created). Only entries the user can read may be hidden."""
        entry = self.entries.fetch_visible(self.user, entry_id)
        return HiddenEntry.objects.get_or_create(user=self.user, diary_entry=entry)

    def unhide_entry(self, hidden_id):
        hidden = self.hidden_entries.fetch("Hidden entry not found.", id=hidden_id)
        self._ensure_owner(hidden)
        hidden.delete()
        return hidden_id

    def list_hidden_users(self):
        return self.hidden_users.list(
            filters={"user": self.user},
            order_by=("-created_at",),
            queryset=HiddenUser.objects.select_related("hidden_user"),
        )

    def hide_user(self, hidden_user_id):
        """Return (hidden_user, created)."""
        if hidden_user_id == self.user.pk:
            raise ValidationError({"hiddenUserId": ["You cannot hide yourself."]})
        target = UserRepo().fetch_user(hidden_user_id)
        hidden, created = HiddenUser.objects.get_or_create(user=self.user, hidden_user=target)
        if created:
            logger.info("User %s hid user %s", self.user.pk, target.pk)
        return hidden, created

    def unhide_user(self, hidden_id):
        hidden = self.hidden_users.fetch("Hidden user not found.", id=hidden_id)
        self._ensure_owner(hidden)
        hidden.delete()
        return hidden_id

    def _ensure_owner(self, row):
        if row.user_id != self.user.pk:
            raise AuthorizationDenied("This item belongs to another user.")
