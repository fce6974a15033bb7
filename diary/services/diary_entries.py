"""Service helpers for diary entry lifecycle, listing and likes."""

import logging

from django.db import transaction

from diary.exceptions import AuthorizationDenied
from diary.models import Like, NotificationType, PrivacyLevel
from diary.repos.entry_repo import EntryRepo
from diary.services.notifications import NotificationService
from diary.services.visibility import VisibilityService, viewer_id_of

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "description",
    "image_url",
    "latitude",
    "longitude",
    "taken_at",
    "privacy_level",
    "category",
)


class DiaryEntryService:
    """Encapsulate diary entry CRUD, visibility-aware listing and like toggling."""

    def __init__(self, repo=None, visibility=None, notifications=None):
        self.repo = repo or EntryRepo()
        self.visibility = visibility or VisibilityService()
        self.notifications = notifications or NotificationService()

    def fetch(self, entry_id):
        """Return the entry or raise NotFound."""
        return self.repo.fetch_entry(entry_id)

    def fetch_visible(self, viewer, entry_id):
        """404 when absent, 403 when the viewer may not read it."""
        return self.visibility.ensure_can_view(viewer, self.fetch(entry_id))

    def fetch_owned(self, user, entry_id):
        entry = self.fetch(entry_id)
        if entry.user_id != user.pk:
            logger.info("User %s refused write access to entry %s", user.pk, entry.pk)
            raise AuthorizationDenied("You can only modify your own entries.")
        return entry

    def create_entry(self, user, data):
        entry = self.repo.create(user=user, **{k: v for k, v in data.items() if k in EDITABLE_FIELDS})
        logger.info("User %s created entry %s (%s)", user.pk, entry.pk, entry.privacy_level)
        return entry

    def update_entry(self, user, entry_id, data):
        entry = self.fetch_owned(user, entry_id)
        for field, value in data.items():
            if field in EDITABLE_FIELDS:
                setattr(entry, field, value)
        entry.save()
        return entry

    def delete_entry(self, user, entry_id):
        entry = self.fetch_owned(user, entry_id)
        entry_pk = entry.pk
        entry.delete()
        logger.info("User %s deleted entry %s", user.pk, entry_pk)
        return entry_pk

    def with_engagement(self, qs, viewer):
        return self.repo.with_engagement(qs, viewer_id_of(viewer))

    def list_visible(self, viewer, **filters):
        """Entries the viewer may read, hidden ones dropped, newest first."""
        qs = self.visibility.filter_visible_entries(self.repo.queryset(), viewer)
        qs = self.repo.apply_filters(qs, **filters)
        return self.with_engagement(qs, viewer).order_by("-created_at")

    def search(self, viewer, term):
        term = (term or "").strip()
        if not term:
            return self.repo.model.objects.none()
        return self.list_visible(viewer, q=term)

    def list_mine(self, user):
        return self.with_engagement(self.repo.list_for_user(user.pk), user)

    def list_for_author(self, viewer, author):
        """
        One author's entries, as far as the viewer may read them.

        PUBLIC_ANONYMOUS entries are left out for everyone but the author.
        """
        qs = self.visibility.filter_visible_entries(self.repo.list_for_user(author.pk), viewer)
        if viewer_id_of(viewer) != author.pk:
            qs = qs.exclude(privacy_level=PrivacyLevel.PUBLIC_ANONYMOUS)
        return self.with_engagement(qs, viewer)

    @transaction.atomic
    def toggle_like(self, user, entry_id):
        """
        Like or unlike an entry.

        Returns (liked, like). An existing like is always removable; a new
        one needs the entry to be readable. A NEW_LIKE notification is
        written together with the like when someone else owns the entry.
        """
        entry = self.fetch(entry_id)
        existing = Like.objects.filter(user=user, diary_entry=entry)
        if existing.exists():
            existing.delete()
            return False, None
        self.visibility.ensure_can_view(user, entry)
        like = Like.objects.create(user=user, diary_entry=entry)
        self.notifications.notify(
            entry.user_id,
            user,
            NotificationType.NEW_LIKE,
            diary_entry=entry,
        )
        return True, like
