"""Model for user comments on diary entries."""

import uuid
from django.conf import settings
from django.db import models


class Comment(models.Model):
    """User-authored comment on a diary entry."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    diary_entry = models.ForeignKey(
        "diary.DiaryEntry",
        on_delete=models.CASCADE,
        db_column='diary_entry_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    # text (1–2000)
    text = models.TextField(max_length=2000)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "comment"
        ordering = ["created_at"]

    def __str__(self):
        return f"Comment by {self.user_id} on {self.diary_entry_id}"
