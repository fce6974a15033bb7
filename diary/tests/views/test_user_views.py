from django.test import TestCase
from django.urls import reverse

from diary.models import Category, FriendshipStatus, PrivacyLevel
from diary.tests.helpers import api_client, make_entry, make_friendship, make_user


class UserSearchViewTestCase(TestCase):
    def setUp(self):
        self.viewer = make_user(username="viewer")
        self.friend = make_user(username="birdfriend")
        self.pending = make_user(username="birdpending")
        self.stranger = make_user(username="birdstranger")
        make_friendship(self.viewer, self.friend)
        make_friendship(self.pending, self.viewer, status=FriendshipStatus.PENDING)

    def test_search_excludes_self_and_related_users(self):
        response = api_client(self.viewer).get(reverse("user-search"), {"q": "BIRD"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([user["username"] for user in response.json()["users"]], ["birdstranger"])

    def test_blank_term_returns_nothing(self):
        response = api_client(self.viewer).get(reverse("user-search"), {"q": "  "})
        self.assertEqual(response.json()["users"], [])

    def test_requires_authentication(self):
        self.assertEqual(api_client().get(reverse("user-search"), {"q": "bird"}).status_code, 401)


class UserDetailViewTestCase(TestCase):
    def setUp(self):
        self.viewer = make_user(username="viewer")
        self.other = make_user(username="other", description="Moth enthusiast")

    def test_profile_without_friendship(self):
        response = api_client(self.viewer).get(reverse("user-detail", args=[self.other.pk]))
        self.assertEqual(response.status_code, 200)
        user = response.json()["user"]
        self.assertEqual(user["description"], "Moth enthusiast")
        self.assertIsNone(user["friendshipStatus"])
        self.assertNotIn("email", user)

    def test_profile_with_pending_request(self):
        friendship = make_friendship(self.viewer, self.other, status=FriendshipStatus.PENDING)
        user = api_client(self.viewer).get(reverse("user-detail", args=[self.other.pk])).json()["user"]
        self.assertEqual(user["friendshipStatus"], "PENDING")
        self.assertEqual(user["friendship"]["id"], str(friendship.pk))
        self.assertTrue(user["friendship"]["isRequester"])

    def test_unknown_user(self):
        self.assertEqual(api_client(self.viewer).get(reverse("user-detail", args=[999999])).status_code, 404)


class UserEntriesViewTestCase(TestCase):
    def setUp(self):
        self.author = make_user(username="author")
        self.friend = make_user(username="friend")
        make_friendship(self.author, self.friend)
        make_entry(user=self.author, title="Open", privacy_level=PrivacyLevel.PUBLIC)
        make_entry(user=self.author, title="Nameless", privacy_level=PrivacyLevel.PUBLIC_ANONYMOUS)
        make_entry(user=self.author, title="Circle", privacy_level=PrivacyLevel.FRIENDS_ONLY)
        make_entry(user=self.author, title="Secret", privacy_level=PrivacyLevel.PRIVATE)
        self.url = reverse("user-entries", args=[self.author.pk])

    def titles(self, user=None):
        return sorted(entry["title"] for entry in api_client(user).get(self.url).json()["entries"])

    def test_anonymous_viewer_sees_public_only(self):
        self.assertEqual(self.titles(), ["Open"])

    def test_friend_sees_friends_only_entries(self):
        self.assertEqual(self.titles(self.friend), ["Circle", "Open"])

    def test_author_sees_everything(self):
        self.assertEqual(self.titles(self.author), ["Circle", "Nameless", "Open", "Secret"])

    def test_unknown_author(self):
        self.assertEqual(api_client().get(reverse("user-entries", args=[999999])).status_code, 404)


class CategoryListViewTestCase(TestCase):
    def test_defaults_created_on_first_read(self):
        response = api_client().get(reverse("category-list"))
        self.assertEqual(response.status_code, 200)
        names = [category["name"] for category in response.json()["categories"]]
        self.assertEqual(names, sorted(Category.DEFAULT_NAMES))
