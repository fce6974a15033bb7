"""Model capturing friend requests and accepted friendships."""

import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q, F


class FriendshipStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    ACCEPTED = "ACCEPTED", "Accepted"
    DECLINED = "DECLINED", "Declined"


class Friendship(models.Model):
    """
    A friend request from `requester` to `addressee`.

    Once ACCEPTED the relationship is symmetric: either side counts as the
    other's friend. Only one row may exist per unordered pair; the reverse
    direction is checked by `FriendshipService` before inserting.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friend_requests_sent",
    )
    addressee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friend_requests_received",
    )
    status = models.CharField(
        max_length=20,
        choices=FriendshipStatus.choices,
        default=FriendshipStatus.PENDING,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Constraints for unique, non-self friendships."""
        db_table = "friendship"
        constraints = [
            models.UniqueConstraint(
                fields=["requester", "addressee"],
                name="uniq_friendship_requester_addressee",
            ),
            models.CheckConstraint(
                condition=~Q(requester=F("addressee")),
                name="chk_friendship_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["requester", "status"], name="friendship_request_3b9d0e_idx"),
            models.Index(fields=["addressee", "status"], name="friendship_address_8e41c7_idx"),
        ]

    def __str__(self) -> str:
        return f"Friendship({self.requester_id} -> {self.addressee_id}, {self.status})"

    def other_side(self, user_id):
        """Return the id of the participant who is not `user_id`."""
        return self.addressee_id if self.requester_id == user_id else self.requester_id

    def other_user(self, user_id):
        """Return the participant who is not `user_id`."""
        return self.addressee if self.other_side(user_id) == self.addressee_id else self.requester

    def involves(self, user_id):
        return user_id in (self.requester_id, self.addressee_id)
