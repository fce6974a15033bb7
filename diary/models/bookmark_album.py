import uuid
from django.conf import settings
from django.db import models

"""
BookmarkAlbum model

A named folder of diary entries a user saved, e.g. "spring birds".

- Each album belongs to exactly one user.
- Bookmarks point at the album with a cascading foreign key, so deleting
  the album deletes its bookmarks in the same statement.
"""


class BookmarkAlbum(models.Model):
    """A collection of saved diary entries for a user."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookmark_albums",
    )

    name = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "bookmark_album"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user"], name="bookmark_al_user_id_5d2f90_idx"),
        ]

    def __str__(self) -> str:
        return f"BookmarkAlbum(user={self.user_id}, name={self.name})"
