"""Service helpers for creating, fetching and clearing notifications."""

import logging

from django.conf import settings

from diary.models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Encapsulate notification writes and inbox queries."""

    def __init__(self, notification_model=Notification):
        self.notification_model = notification_model

    def notify(self, recipient_id, actor, notification_type, **links):
        """
        Record one notification for recipient_id.

        `links` are the optional diary_entry / comment / friendship targets.
        Nothing is created when the actor would notify themselves.
        """
        if actor is None or recipient_id == actor.pk:
            return None
        notification = self.notification_model.objects.create(
            recipient_id=recipient_id,
            actor=actor,
            notification_type=notification_type,
            **links,
        )
        logger.debug("Notification %s for user %s from %s", notification_type, recipient_id, actor.pk)
        return notification

    def fetch(self, user, limit=None):
        """Return the newest notifications for a user."""
        if limit is None:
            limit = settings.DIARY["NOTIFICATION_PAGE_SIZE"]
        return list(
            self.notification_model.objects.filter(recipient=user)
            .select_related("actor", "diary_entry", "comment", "friendship")
            .order_by("-created_at", "-id")[:limit]
        )

    def unread_count(self, user):
        return self.notification_model.objects.filter(recipient=user, is_read=False).count()

    def inbox(self, user, limit=None):
        """Return (notifications, unread_count) for the notification list."""
        return self.fetch(user, limit=limit), self.unread_count(user)

    def mark_all_read(self, user):
        """Mark all unread notifications for the user as read; return how many changed."""
        return self.notification_model.objects.filter(recipient=user, is_read=False).update(is_read=True)

    def mark_read_for_friendship(self, user, friendship):
        return self.notification_model.objects.filter(
            recipient=user, friendship=friendship, is_read=False
        ).update(is_read=True)
