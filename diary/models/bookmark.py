"""Join model linking a BookmarkAlbum to a DiaryEntry."""

import uuid
from django.db import models


class Bookmark(models.Model):
    """Join table linking an album to a diary entry with a timestamp."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    album = models.ForeignKey(
        "diary.BookmarkAlbum",
        on_delete=models.CASCADE,
        related_name="bookmarks",
        db_column="bookmark_album_id",
    )

    diary_entry = models.ForeignKey(
        "diary.DiaryEntry",
        on_delete=models.CASCADE,
        related_name="bookmarks",
        db_column="diary_entry_id",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for Bookmark."""
        db_table = "bookmark"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["album", "diary_entry"],
                name="uniq_bookmark_album_entry",
            ),
        ]
        indexes = [
            models.Index(fields=["album"], name="bookmark_bookmar_1e7a3c_idx"),
            models.Index(fields=["diary_entry"], name="bookmark_diary_e_9c4b21_idx"),
        ]

    def __str__(self) -> str:
        return f"Bookmark(album={self.album_id}, entry={self.diary_entry_id})"
