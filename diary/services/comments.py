"""Service helpers for creating, listing and deleting comments."""

import logging

from django.db import transaction

from diary.db_accessor import DB_Accessor
from diary.exceptions import AuthorizationDenied
from diary.models import Comment, NotificationType
from diary.services.diary_entries import DiaryEntryService
from diary.services.notifications import NotificationService

logger = logging.getLogger(__name__)


class CommentService:
    """Encapsulate comment CRUD for diary entries."""

    def __init__(self, entries=None, notifications=None):
        self.comments = DB_Accessor(Comment)
        self.entries = entries or DiaryEntryService()
        self.notifications = notifications or NotificationService()

    def fetch(self, comment_id):
        return self.comments.fetch("Comment not found.", id=comment_id)

    def list_for_entry(self, viewer, entry_id):
        """Comments on a readable entry, oldest first."""
        entry = self.entries.fetch_visible(viewer, entry_id)
        return self.comments.list(
            filters={"diary_entry": entry},
            order_by=("created_at",),
            queryset=Comment.objects.select_related("user"),
        )

    @transaction.atomic
    def create_comment(self, user, entry_id, text):
        entry = self.entries.fetch_visible(user, entry_id)
        comment = self.comments.create(diary_entry=entry, user=user, text=text)
        self.notifications.notify(
            entry.user_id,
            user,
            NotificationType.NEW_COMMENT,
            diary_entry=entry,
            comment=comment,
        )
        return comment

    def can_delete(self, comment, user):
        """The comment's author and the entry's owner may delete it."""
        return user.pk in (comment.user_id, comment.diary_entry.user_id)

    def delete_comment(self, user, comment_id):
        comment = self.fetch(comment_id)
        if not self.can_delete(comment, user):
            logger.info("User %s refused deletion of comment %s", user.pk, comment.pk)
            raise AuthorizationDenied("You can only delete your own comments or comments on your entries.")
        comment.delete()
        return comment_id
