from django.conf import settings
from django.test import RequestFactory, TestCase

from diary.authentication import JWTCookieAuthentication
from diary.tests.helpers import make_user
from diary.tokens import issue_token


class JWTCookieAuthenticationTestCase(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.backend = JWTCookieAuthentication()
        self.user = make_user()

    def request_with(self, token):
        request = self.factory.get("/api/entries")
        if token is not None:
            request.COOKIES[settings.DIARY["AUTH_COOKIE_NAME"]] = token
        return request

    def test_valid_cookie(self):
        token = issue_token(self.user)
        user, returned = self.backend.authenticate(self.request_with(token))
        self.assertEqual(user, self.user)
        self.assertEqual(returned, token)

    def test_no_cookie(self):
        self.assertIsNone(self.backend.authenticate(self.request_with(None)))

    def test_garbage_and_expired_tokens(self):
        self.assertIsNone(self.backend.authenticate(self.request_with("not.a.token")))
        self.assertIsNone(self.backend.authenticate(self.request_with(issue_token(self.user, lifetime=-5))))

    def test_deleted_or_inactive_user(self):
        token = issue_token(self.user)
        self.user.is_active = False
        self.user.save()
        self.assertIsNone(self.backend.authenticate(self.request_with(token)))
        self.user.delete()
        self.assertIsNone(self.backend.authenticate(self.request_with(token)))

    def test_challenge_header(self):
        self.assertTrue(self.backend.authenticate_header(self.request_with(None)))
