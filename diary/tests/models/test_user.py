from django.db import IntegrityError, transaction
from django.test import TestCase

from diary.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def test_avatar_prefers_icon_url(self):
        user = make_user(icon_url="https://cdn.example.org/me.png")
        self.assertEqual(user.avatar_url, "https://cdn.example.org/me.png")

    def test_avatar_falls_back_to_gravatar(self):
        user = make_user()
        self.assertIn("gravatar.com/avatar/", user.avatar_url)

    def test_email_is_unique(self):
        make_user(username="first", email="same@example.org")
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                make_user(username="second", email="same@example.org")

    def test_password_is_hashed(self):
        user = make_user(password="Password123")
        self.assertNotEqual(user.password, "Password123")
        self.assertTrue(user.check_password("Password123"))
