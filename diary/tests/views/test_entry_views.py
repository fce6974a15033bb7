import uuid

from django.test import TestCase
from django.urls import reverse

from diary.models import Category, Comment, DiaryEntry, Like, PrivacyLevel
from diary.tests.helpers import api_client, make_entry, make_friendship, make_user


def entry_payload(**overrides):
    payload = {
        "title": "Kingfisher",
        "description": "Flash of blue over the stream",
        "latitude": 35.6,
        "longitude": 139.7,
        "takenAt": "2024-05-01T07:30:00+09:00",
        "privacyLevel": "PUBLIC",
    }
    payload.update(overrides)
    return payload


class CreateEntryViewTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="writer")
        self.client = api_client(self.user)
        self.url = reverse("entry-list")

    def test_create_entry(self):
        category = Category.objects.create(name="Birds")
        response = self.client.post(self.url, entry_payload(categoryId=category.pk))
        self.assertEqual(response.status_code, 201)
        data = response.json()["entry"]
        self.assertEqual(data["title"], "Kingfisher")
        self.assertEqual(data["privacyLevel"], "PUBLIC")
        self.assertEqual(data["category"]["name"], "Birds")
        self.assertEqual(data["user"]["username"], "writer")
        self.assertEqual(data["likesCount"], 0)
        self.assertFalse(data["isLikedByCurrentUser"])
        self.assertEqual(DiaryEntry.objects.get().user, self.user)

    def test_privacy_defaults_to_private(self):
        payload = entry_payload()
        del payload["privacyLevel"]
        response = self.client.post(self.url, payload)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["entry"]["privacyLevel"], "PRIVATE")

    def test_requires_authentication(self):
        response = api_client().post(self.url, entry_payload())
        self.assertEqual(response.status_code, 401)
        self.assertFalse(DiaryEntry.objects.exists())

    def test_validation_errors(self):
        cases = [
            {"title": "   "},
            {"latitude": 95},
            {"longitude": "east"},
            {"takenAt": "yesterday"},
            {"privacyLevel": "SECRET"},
            {"categoryId": 999},
        ]
        for overrides in cases:
            with self.subTest(overrides=overrides):
                response = self.client.post(self.url, entry_payload(**overrides))
                self.assertEqual(response.status_code, 400)
        self.assertFalse(DiaryEntry.objects.exists())


class ListEntriesViewTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.viewer = make_user(username="viewer")
        self.public = make_entry(user=self.owner, title="Public crane")
        self.anonymous = make_entry(user=self.owner, title="Quiet frog", privacy_level=PrivacyLevel.PUBLIC_ANONYMOUS)
        make_entry(user=self.owner, title="Private nest", privacy_level=PrivacyLevel.PRIVATE)
        make_entry(user=self.owner, title="Friends fox", privacy_level=PrivacyLevel.FRIENDS_ONLY)
        self.url = reverse("entry-list")

    def titles(self, response):
        return {item["title"] for item in response.json()["entries"]}

    def test_anonymous_listing(self):
        response = api_client().get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.titles(response), {"Public crane", "Quiet frog"})

    def test_anonymous_author_is_hidden_from_others(self):
        items = {item["title"]: item for item in api_client(self.viewer).get(self.url).json()["entries"]}
        self.assertIsNone(items["Quiet frog"]["user"])
        self.assertEqual(items["Public crane"]["user"]["username"], "owner")

        own = {item["title"]: item for item in api_client(self.owner).get(self.url).json()["entries"]}
        self.assertEqual(own["Quiet frog"]["user"]["username"], "owner")

    def test_engagement_fields(self):
        Like.objects.create(user=self.viewer, diary_entry=self.public)
        Comment.objects.create(user=self.viewer, diary_entry=self.public, text="Nice")
        items = {item["title"]: item for item in api_client(self.viewer).get(self.url).json()["entries"]}
        self.assertEqual(items["Public crane"]["likesCount"], 1)
        self.assertEqual(items["Public crane"]["commentsCount"], 1)
        self.assertTrue(items["Public crane"]["isLikedByCurrentUser"])
        self.assertFalse(items["Quiet frog"]["isLikedByCurrentUser"])

    def test_filters(self):
        response = api_client(self.viewer).get(self.url, {"q": "crane", "timeOfDay": "all"})
        self.assertEqual(self.titles(response), {"Public crane"})

    def test_bad_filter_values(self):
        client = api_client(self.viewer)
        self.assertEqual(client.get(self.url, {"startDate": "01/02/2024"}).status_code, 400)
        self.assertEqual(client.get(self.url, {"timeOfDay": "dawn"}).status_code, 400)
        self.assertEqual(client.get(self.url, {"categoryId": "birds"}).status_code, 400)

    def test_search(self):
        url = reverse("entry-search")
        self.assertEqual(self.titles(api_client().get(url, {"q": "frog"})), {"Quiet frog"})
        self.assertEqual(self.titles(api_client().get(url, {"q": "fox"})), set())
        self.assertEqual(api_client().get(url).json()["entries"], [])

    def test_my_entries(self):
        response = api_client(self.owner).get(reverse("entry-mine"))
        self.assertEqual(len(response.json()["entries"]), 4)
        self.assertEqual(api_client().get(reverse("entry-mine")).status_code, 401)


class EntryDetailViewTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.stranger = make_user(username="stranger")
        self.entry = make_entry(user=self.owner, title="Fox cubs", privacy_level=PrivacyLevel.FRIENDS_ONLY)

    def url(self, entry_id=None):
        return reverse("entry-detail", args=[entry_id or self.entry.pk])

    def test_missing_entry_is_404(self):
        response = api_client(self.owner).get(self.url(uuid.uuid4()))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(api_client(self.owner).get(self.url("nonsense")).status_code, 404)

    def test_friends_only_entry_after_friendship(self):
        self.assertEqual(api_client(self.stranger).get(self.url()).status_code, 403)
        self.assertEqual(api_client().get(self.url()).status_code, 403)
        make_friendship(self.stranger, self.owner)
        response = api_client(self.stranger).get(self.url())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["entry"]["title"], "Fox cubs")

    def test_put_replaces_fields(self):
        response = api_client(self.owner).put(
            self.url(), entry_payload(title="Fox family", privacyLevel="PUBLIC")
        )
        self.assertEqual(response.status_code, 200)
        self.entry.refresh_from_db()
        self.assertEqual(self.entry.title, "Fox family")
        self.assertEqual(self.entry.privacy_level, PrivacyLevel.PUBLIC)

    def test_put_validates_like_create(self):
        response = api_client(self.owner).put(self.url(), entry_payload(latitude=-91))
        self.assertEqual(response.status_code, 400)

    def test_patch_updates_only_given_fields(self):
        response = api_client(self.owner).patch(self.url(), {"privacyLevel": "PRIVATE"})
        self.assertEqual(response.status_code, 200)
        self.entry.refresh_from_db()
        self.assertEqual(self.entry.privacy_level, PrivacyLevel.PRIVATE)
        self.assertEqual(self.entry.title, "Fox cubs")

    def test_non_owner_cannot_modify(self):
        make_friendship(self.stranger, self.owner)
        client = api_client(self.stranger)
        self.assertEqual(client.put(self.url(), entry_payload()).status_code, 403)
        self.assertEqual(client.delete(self.url()).status_code, 403)
        self.assertTrue(DiaryEntry.objects.filter(pk=self.entry.pk).exists())

    def test_owner_deletes(self):
        self.assertEqual(api_client(self.owner).delete(self.url()).status_code, 200)
        self.assertFalse(DiaryEntry.objects.exists())


class CommentViewsTestCase(TestCase):
    def setUp(self):
        self.owner = make_user(username="owner")
        self.commenter = make_user(username="commenter")
        self.entry = make_entry(user=self.owner)
        self.url = reverse("entry-comments", args=[self.entry.pk])

    def test_post_and_list_comments(self):
        response = api_client(self.commenter).post(self.url, {"text": "  Beautiful  "})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["comment"]["text"], "Beautiful")
        listing = api_client().get(self.url).json()["comments"]
        self.assertEqual([c["text"] for c in listing], ["Beautiful"])
        self.assertEqual(listing[0]["user"]["username"], "commenter")

    def test_blank_or_long_text_rejected(self):
        client = api_client(self.commenter)
        self.assertEqual(client.post(self.url, {"text": "   "}).status_code, 400)
        self.assertEqual(client.post(self.url, {"text": "x" * 2001}).status_code, 400)

    def test_comment_on_missing_entry(self):
        url = reverse("entry-comments", args=[uuid.uuid4()])
        self.assertEqual(api_client(self.commenter).post(url, {"text": "Hi"}).status_code, 404)

    def test_delete_comment_permissions(self):
        comment = Comment.objects.create(user=self.commenter, diary_entry=self.entry, text="Hi")
        url = reverse("comment-detail", args=[comment.pk])
        self.assertEqual(api_client(make_user()).delete(url).status_code, 403)
        self.assertEqual(api_client(self.owner).delete(url).status_code, 200)
        self.assertEqual(api_client(self.owner).delete(url).status_code, 404)
