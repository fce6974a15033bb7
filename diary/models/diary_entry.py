import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

"""
DiaryEntry model

One geotagged observation a user records: what they saw (title, description,
photo URL), where (latitude/longitude), when (`taken_at`) and who may read it.

`privacy_level` decides visibility:
- PRIVATE: owner only.
- FRIENDS_ONLY: owner and users with an accepted friendship with the owner.
- PUBLIC: everyone, including signed-out visitors.
- PUBLIC_ANONYMOUS: everyone, but the author is not disclosed to other users.

The rule itself lives in `diary.services.visibility`; this model only stores
the level. `image_url` is whatever URL the external blob store returned.
Entries are listed newest first by `created_at`.
"""


class PrivacyLevel(models.TextChoices):
    PRIVATE = "PRIVATE", "Private"
    FRIENDS_ONLY = "FRIENDS_ONLY", "Friends only"
    PUBLIC = "PUBLIC", "Public"
    PUBLIC_ANONYMOUS = "PUBLIC_ANONYMOUS", "Public (anonymous)"


class DiaryEntry(models.Model):
    PUBLIC_LEVELS = (PrivacyLevel.PUBLIC, PrivacyLevel.PUBLIC_ANONYMOUS)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="diary_entries",
        db_column="user_id",
    )

    title = models.CharField(max_length=255)
    description = models.TextField(max_length=4000, blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, null=True)

    latitude = models.FloatField(validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)])
    longitude = models.FloatField(validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)])
    taken_at = models.DateTimeField()

    privacy_level = models.CharField(
        max_length=20,
        choices=PrivacyLevel.choices,
        default=PrivacyLevel.PRIVATE,
    )

    category = models.ForeignKey(
        "diary.Category",
        on_delete=models.SET_NULL,
        related_name="diary_entries",
        null=True,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "diary_entry"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="diary_entry_user_id_7c1a52_idx"),
            models.Index(fields=["privacy_level"], name="diary_entry_privacy_0f2e4d_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def is_anonymous(self):
        return self.privacy_level == PrivacyLevel.PUBLIC_ANONYMOUS

    @property
    def likes_count(self):
        return self.likes.count()
