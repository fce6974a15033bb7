from django.conf import settings
from django.db import models

"""
Notification model

In-app notifications shown behind the bell icon.

Core fields:
- `recipient`: who is notified
- `actor`: who did the thing
- `notification_type`: FRIEND_REQUEST, NEW_LIKE or NEW_COMMENT

Optional links, filled when relevant:
- `diary_entry`: the entry that was liked or commented on
- `comment`: the comment for NEW_COMMENT
- `friendship`: the pending request for FRIEND_REQUEST

Every link cascades, so deleting the entry, comment or friendship removes
the notification that points at it.
"""


class NotificationType(models.TextChoices):
    FRIEND_REQUEST = "FRIEND_REQUEST", "Friend request"
    NEW_LIKE = "NEW_LIKE", "New like"
    NEW_COMMENT = "NEW_COMMENT", "New comment"


class Notification(models.Model):
    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='notifications', on_delete=models.CASCADE)
    actor = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='sent_notifications', on_delete=models.CASCADE)
    notification_type = models.CharField(max_length=20, choices=NotificationType.choices)
    diary_entry = models.ForeignKey(
        "diary.DiaryEntry",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    comment = models.ForeignKey(
        "diary.Comment",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    friendship = models.ForeignKey(
        "diary.Friendship",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="notifications",
    )

    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notification"
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=["recipient", "is_read"], name="notificatio_recipie_4f8a62_idx"),
        ]

    def __str__(self):
        return f"Notification for {self.recipient_id}: {self.notification_type}"
