"""Model representing a user's like on a diary entry."""

from django.conf import settings
from django.db import models


class Like(models.Model):
    """User like on a diary entry."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    diary_entry = models.ForeignKey(
        "diary.DiaryEntry",
        on_delete=models.CASCADE,
        db_column='diary_entry_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/entry pair."""
        constraints = [
            models.UniqueConstraint(fields=["user", "diary_entry"], name="uniq_like_user_entry"),
        ]
        db_table = "like"

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.diary_entry_id}"
