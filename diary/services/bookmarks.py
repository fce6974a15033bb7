"""Service helpers for bookmark albums and the entries saved in them."""

import logging

from django.db import transaction
from django.db.models import Count

from diary.db_accessor import DB_Accessor
from diary.exceptions import AuthorizationDenied, Conflict
from diary.models import Bookmark, BookmarkAlbum
from diary.services.diary_entries import DiaryEntryService

logger = logging.getLogger(__name__)


class BookmarkService:
    """Encapsulate album CRUD and saving entries into albums for one user."""

    def __init__(self, user, entries=None):
        self.user = user
        self.albums = DB_Accessor(BookmarkAlbum)
        self.bookmarks = DB_Accessor(Bookmark)
        self.entries = entries or DiaryEntryService()

    def list_albums(self):
        return self.albums.list(
            filters={"user": self.user},
            order_by=("-created_at",),
            queryset=BookmarkAlbum.objects.annotate(bookmarks_total=Count("bookmarks")),
        )

    def fetch_album(self, album_id):
        """404 when the album does not exist, 403 when it belongs to someone else."""
        album = self.albums.fetch("Bookmark album not found.", id=album_id)
        if album.user_id != self.user.pk:
            raise AuthorizationDenied("This bookmark album belongs to another user.")
        return album

    def create_album(self, name):
        album = self.albums.create(user=self.user, name=name)
        logger.info("User %s created album %s", self.user.pk, album.pk)
        return album

    def rename_album(self, album_id, name):
        album = self.fetch_album(album_id)
        album.name = name
        album.save(update_fields=["name"])
        return album

    def delete_album(self, album_id):
        """Delete the album; its bookmarks go with it."""
        album = self.fetch_album(album_id)
        album.delete()
        logger.info("User %s deleted album %s", self.user.pk, album_id)
        return album_id

    def list_bookmarks(self, album_id):
        """
        Bookmarks in one album whose entries the user can still read.

        Each bookmark's diary_entry carries the engagement annotations used
        by the entry serializer.
        """
        album = self.fetch_album(album_id)
        rows = list(Bookmark.objects.filter(album=album).order_by("-created_at"))
        visible = self.entries.visibility.filter_visible_entries(
            self.entries.repo.queryset().filter(id__in=[row.diary_entry_id for row in rows]),
            self.user,
            exclude_hidden=False,
        )
        by_id = {entry.pk: entry for entry in self.entries.with_engagement(visible, self.user)}
        result = []
        for row in rows:
            entry = by_id.get(row.diary_entry_id)
            if entry is None:
                continue
            row.diary_entry = entry
            result.append(row)
        return result

    @transaction.atomic
    def add_bookmark(self, album_id, entry_id):
        album = self.fetch_album(album_id)
        entry = self.entries.fetch_visible(self.user, entry_id)
        if Bookmark.objects.filter(album=album, diary_entry=entry).exists():
            raise Conflict("This entry is already saved in the album.")
        return self.bookmarks.create(album=album, diary_entry=entry)

    def remove_bookmark(self, bookmark_id):
        bookmark = self.bookmarks.fetch(
            "Bookmark not found.",
            id=bookmark_id,
        )
        if bookmark.album.user_id != self.user.pk:
            raise AuthorizationDenied("This bookmark belongs to another user.")
        bookmark.delete()
        return bookmark_id
