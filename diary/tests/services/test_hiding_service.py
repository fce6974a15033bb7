from django.test import TestCase
from rest_framework.exceptions import ValidationError

from diary.exceptions import AuthorizationDenied, NotFound
from diary.models import HiddenEntry, HiddenUser, PrivacyLevel
from diary.services import DiaryEntryService, HidingService
from diary.tests.helpers import make_entry, make_user


class HidingServiceTestCase(TestCase):
    def setUp(self):
        self.viewer = make_user(username="viewer")
        self.author = make_user(username="author")
        self.entry = make_entry(user=self.author, title="Loud crows")
        self.service = HidingService(self.viewer)

    def test_hide_entry_is_idempotent(self):
        first, created = self.service.hide_entry(self.entry.pk)
        self.assertTrue(created)
        second, created = self.service.hide_entry(self.entry.pk)
        self.assertFalse(created)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(HiddenEntry.objects.count(), 1)

    def test_cannot_hide_unreadable_entry(self):
        secret = make_entry(user=self.author, title="Owl nest", privacy_level=PrivacyLevel.PRIVATE)
        with self.assertRaises(AuthorizationDenied):
            self.service.hide_entry(secret.pk)
        self.assertFalse(HiddenEntry.objects.exists())

    def test_hide_missing_entry(self):
        with self.assertRaises(NotFound):
            self.service.hide_entry("00000000-0000-0000-0000-000000000000")

    def test_hidden_user_disappears_from_search(self):
        entries = DiaryEntryService()
        self.assertEqual([e.title for e in entries.search(self.viewer, "crows")], ["Loud crows"])
        self.service.hide_user(self.author.pk)
        self.assertEqual(list(entries.search(self.viewer, "crows")), [])

    def test_cannot_hide_self(self):
        with self.assertRaises(ValidationError):
            self.service.hide_user(self.viewer.pk)
        self.assertFalse(HiddenUser.objects.exists())

    def test_hide_unknown_user(self):
        with self.assertRaises(NotFound):
            self.service.hide_user(424242)

    def test_unhide_requires_owner(self):
        hidden, _ = self.service.hide_user(self.author.pk)
        with self.assertRaises(AuthorizationDenied):
            HidingService(self.author).unhide_user(hidden.pk)
        self.service.unhide_user(hidden.pk)
        self.assertFalse(HiddenUser.objects.exists())

    def test_lists_belong_to_user(self):
        self.service.hide_entry(self.entry.pk)
        HidingService(self.author).hide_user(self.viewer.pk)
        self.assertEqual([row.diary_entry for row in self.service.list_hidden_entries()], [self.entry])
        self.assertEqual(list(self.service.list_hidden_users()), [])
