"""Custom user model with profile metadata and avatar helpers."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator, MaxLengthValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Diary author and viewer. Logs in with e-mail and password."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    email = models.EmailField(unique=True, blank=False)
    icon_url = models.CharField(max_length=500, blank=True, null=True)
    description = models.TextField(
        max_length=500,
        blank=True,
        help_text="short profile text shown on the user page",
        validators=[MaxLengthValidator(500)]
    )

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    @property
    def avatar_url(self):
        """Uploaded icon URL, or a gravatar fallback."""
        return self.icon_url or self.gravatar()
