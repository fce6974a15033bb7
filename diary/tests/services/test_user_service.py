from django.test import TestCase
from rest_framework.exceptions import AuthenticationFailed

from diary.exceptions import Conflict, NotFound
from diary.models import FriendshipStatus
from diary.services import UserService
from diary.tests.helpers import make_friendship, make_user


class UserServiceTestCase(TestCase):
    def setUp(self):
        self.service = UserService()

    def test_register_and_authenticate(self):
        user = self.service.register("walker", "walker@example.org", "Password123")
        self.assertEqual(self.service.authenticate("WALKER@example.org", "Password123"), user)

    def test_register_duplicate_email(self):
        make_user(username="first", email="taken@example.org")
        with self.assertRaises(Conflict):
            self.service.register("second", "taken@example.org", "Password123")

    def test_register_duplicate_username(self):
        make_user(username="walker")
        with self.assertRaises(Conflict):
            self.service.register("Walker", "new@example.org", "Password123")

    def test_bad_credentials(self):
        make_user(username="walker", email="walker@example.org")
        with self.assertRaises(AuthenticationFailed):
            self.service.authenticate("walker@example.org", "wrong-password")
        with self.assertRaises(AuthenticationFailed):
            self.service.authenticate("nobody@example.org", "Password123")

    def test_update_profile(self):
        user = make_user(username="walker")
        self.service.update_profile(
            user,
            {"username": "rambler", "description": "Hills", "icon_url": "https://x.org/a.png", "password": "NewPass456"},
        )
        user.refresh_from_db()
        self.assertEqual(user.username, "rambler")
        self.assertEqual(user.description, "Hills")
        self.assertTrue(user.check_password("NewPass456"))

    def test_update_profile_username_taken(self):
        make_user(username="taken")
        user = make_user(username="walker")
        with self.assertRaises(Conflict):
            self.service.update_profile(user, {"username": "taken"})

    def test_search_excludes_self_and_anyone_in_a_friendship(self):
        viewer = make_user(username="birdwatcher")
        friend = make_user(username="birdfriend")
        pending = make_user(username="birdpending")
        make_user(username="birdstranger")
        make_user(username="fishfan")
        make_friendship(viewer, friend)
        make_friendship(pending, viewer, status=FriendshipStatus.PENDING)

        found = [user.username for user in self.service.search(viewer, "BIRD")]
        self.assertEqual(found, ["birdstranger"])
        self.assertEqual(self.service.search(viewer, " "), [])

    def test_search_is_limited(self):
        viewer = make_user(username="viewer")
        for i in range(12):
            make_user(username=f"moth{i:02d}")
        self.assertEqual(len(self.service.search(viewer, "moth")), 10)

    def test_profile_includes_friendship_status(self):
        viewer = make_user(username="viewer")
        other = make_user(username="other")
        make_friendship(other, viewer, status=FriendshipStatus.PENDING)
        user, friendship = self.service.profile(viewer, other.pk)
        self.assertEqual(user, other)
        self.assertEqual(friendship["status"], FriendshipStatus.PENDING)
        self.assertIsNone(self.service.profile(viewer, viewer.pk)[1])
        with self.assertRaises(NotFound):
            self.service.profile(viewer, 987654)
