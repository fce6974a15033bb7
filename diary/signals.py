import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from diary.models import Notification

logger = logging.getLogger(__name__)


def _history_limit():
    return settings.DIARY["NOTIFICATION_HISTORY_LIMIT"]


@receiver(post_save, sender=Notification)
def trim_notification_history(sender, instance, created, **kwargs):
    """Drop read notifications that fall outside the recipient's newest rows. Unread ones always stay."""
    if not created:
        return
    limit = _history_limit()
    outside_ids = list(
        Notification.objects.filter(recipient_id=instance.recipient_id)
        .order_by("-created_at", "-id")
        .values_list("id", flat=True)[limit:]
    )
    if not outside_ids:
        return
    deleted, _ = Notification.objects.filter(id__in=outside_ids, is_read=True).delete()
    if deleted:
        logger.debug("Trimmed %d read notifications for user %s", deleted, instance.recipient_id)
