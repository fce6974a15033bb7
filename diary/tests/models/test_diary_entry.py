from datetime import timedelta

from django.core.exceptions import ValidationError
from django.test import TestCase
from django.utils import timezone

from diary.models import Category, DiaryEntry, Like, PrivacyLevel
from diary.tests.helpers import make_entry, make_user


class DiaryEntryModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="naturalist")
        self.entry = make_entry(user=self.user)

    def test_defaults_to_private(self):
        entry = DiaryEntry.objects.create(
            user=self.user, title="Moth", latitude=0, longitude=0, taken_at=timezone.now()
        )
        self.assertEqual(entry.privacy_level, PrivacyLevel.PRIVATE)

    def test_valid_entry_passes_full_clean(self):
        self.entry.full_clean()

    def test_latitude_out_of_range_is_invalid(self):
        self.entry.latitude = 91
        with self.assertRaises(ValidationError):
            self.entry.full_clean()

    def test_longitude_out_of_range_is_invalid(self):
        self.entry.longitude = -180.5
        with self.assertRaises(ValidationError):
            self.entry.full_clean()

    def test_blank_title_is_invalid(self):
        self.entry.title = ""
        with self.assertRaises(ValidationError):
            self.entry.full_clean()

    def test_is_anonymous_only_for_public_anonymous(self):
        self.assertFalse(self.entry.is_anonymous)
        self.entry.privacy_level = PrivacyLevel.PUBLIC_ANONYMOUS
        self.assertTrue(self.entry.is_anonymous)

    def test_likes_count(self):
        Like.objects.create(user=make_user(), diary_entry=self.entry)
        Like.objects.create(user=make_user(), diary_entry=self.entry)
        self.assertEqual(self.entry.likes_count, 2)

    def test_newest_first_ordering(self):
        older = make_entry(user=self.user, title="Older")
        DiaryEntry.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))
        titles = list(DiaryEntry.objects.values_list("title", flat=True))
        self.assertEqual(titles[-1], "Older")

    def test_deleting_category_keeps_entry(self):
        category = Category.objects.create(name="Birds")
        self.entry.category = category
        self.entry.save()
        category.delete()
        self.entry.refresh_from_db()
        self.assertIsNone(self.entry.category)

    def test_deleting_user_deletes_entries(self):
        self.user.delete()
        self.assertFalse(DiaryEntry.objects.exists())
