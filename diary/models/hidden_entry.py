"""Viewer-scoped suppression of a single diary entry."""

import uuid
from django.conf import settings
from django.db import models


class HiddenEntry(models.Model):
    """An entry `user` no longer wants to see in listings."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="hidden_entries",
    )
    diary_entry = models.ForeignKey(
        "diary.DiaryEntry",
        on_delete=models.CASCADE,
        related_name="hidden_by",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "hidden_entry"
        constraints = [
            models.UniqueConstraint(fields=["user", "diary_entry"], name="uniq_hidden_entry_user_entry"),
        ]

    def __str__(self) -> str:
        return f"HiddenEntry(user={self.user_id}, entry={self.diary_entry_id})"
