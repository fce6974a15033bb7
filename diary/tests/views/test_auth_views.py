from django.conf import settings
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from diary.models import User
from diary.tests.helpers import api_client, make_user

COOKIE = settings.DIARY["AUTH_COOKIE_NAME"]


class RegisterViewTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("auth-register")

    def test_register_creates_user(self):
        response = self.client.post(
            self.url, {"username": "walker", "email": "walker@example.org", "password": "Password123"}
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["user"]["email"], "walker@example.org")
        self.assertTrue(User.objects.filter(username="walker").exists())

    def test_missing_fields(self):
        response = self.client.post(self.url, {"email": "walker@example.org"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertIn("message", body)
        self.assertIn("username", body["errors"])
        self.assertIn("password", body["errors"])

    def test_duplicate_email_conflicts(self):
        make_user(username="first", email="walker@example.org")
        response = self.client.post(
            self.url, {"username": "walker", "email": "walker@example.org", "password": "Password123"}
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["message"], "A user with this email already exists.")


class LoginLogoutViewTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(username="walker", email="walker@example.org", password="Password123")

    def test_login_sets_http_only_cookie(self):
        response = self.client.post(
            reverse("auth-login"), {"email": "walker@example.org", "password": "Password123"}
        )
        self.assertEqual(response.status_code, 200)
        cookie = response.cookies[COOKIE]
        self.assertTrue(cookie["httponly"])
        self.assertTrue(cookie.value)

        me = self.client.get(reverse("auth-me"))
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["user"]["username"], "walker")

    def test_login_with_bad_password(self):
        response = self.client.post(
            reverse("auth-login"), {"email": "walker@example.org", "password": "nope-nope"}
        )
        self.assertEqual(response.status_code, 401)
        self.assertNotIn(COOKIE, response.cookies)

    def test_logout_clears_cookie(self):
        client = api_client(self.user)
        response = client.post(reverse("auth-logout"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.cookies[COOKIE].value, "")


class MeViewTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="walker")
        self.url = reverse("auth-me")

    def test_requires_authentication(self):
        response = APIClient().get(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Authentication required.")

    def test_invalid_cookie_is_anonymous(self):
        client = APIClient()
        client.cookies[COOKIE] = "not-a-token"
        self.assertEqual(client.get(self.url).status_code, 401)

    def test_update_profile(self):
        response = api_client(self.user).put(
            self.url, {"username": "rambler", "description": "Hills and moors", "iconUrl": "https://x.org/a.png"}
        )
        self.assertEqual(response.status_code, 200)
        data = response.json()["user"]
        self.assertEqual(data["username"], "rambler")
        self.assertEqual(data["iconUrl"], "https://x.org/a.png")
        self.assertEqual(data["description"], "Hills and moors")

    def test_update_rejects_short_password(self):
        response = api_client(self.user).put(self.url, {"password": "short"})
        self.assertEqual(response.status_code, 400)
