"""Viewer-scoped suppression of every entry by another user."""

import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q, F


class HiddenUser(models.Model):
    """`user` hides all entries authored by `hidden_user`. Not a global block."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="hidden_users",
    )
    hidden_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="hidden_by",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "hidden_user"
        constraints = [
            models.UniqueConstraint(fields=["user", "hidden_user"], name="uniq_hidden_user_pair"),
            models.CheckConstraint(condition=~Q(user=F("hidden_user")), name="chk_hidden_user_not_self"),
        ]

    def __str__(self) -> str:
        return f"HiddenUser(user={self.user_id}, hidden={self.hidden_user_id})"
