"""
Friend requests and friendships.

A Friendship row is created PENDING by the requester and answered by the
addressee with ACCEPTED or DECLINED. There is at most one row per unordered
pair of users, so a second request in either direction is refused with a
message that says why.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import ValidationError

from diary.db_accessor import DB_Accessor
from diary.exceptions import AuthorizationDenied, Conflict, NotFound
from diary.models import Friendship, FriendshipStatus, NotificationType
from diary.repos.user_repo import UserRepo
from diary.services.notifications import NotificationService

logger = logging.getLogger(__name__)

EXISTING_FRIENDSHIP_MESSAGES = {
    FriendshipStatus.ACCEPTED: "You are already friends with this user.",
    FriendshipStatus.PENDING: "A friend request between you and this user is already pending.",
    FriendshipStatus.DECLINED: "A friend request between you and this user was declined.",
}

RESPONSE_STATUSES = (FriendshipStatus.ACCEPTED, FriendshipStatus.DECLINED)


def between(user_id, other_id):
    return Q(requester_id=user_id, addressee_id=other_id) | Q(requester_id=other_id, addressee_id=user_id)


class FriendshipService:
    def __init__(self, actor, notifications=None):
        self.actor = actor
        self.friendships = DB_Accessor(Friendship)
        self.users = UserRepo()
        self.notifications = notifications or NotificationService()

    def existing_with(self, other_id):
        return Friendship.objects.filter(between(self.actor.pk, other_id)).first()

    def status_with(self, other):
        """Return the friendship row with `other` (either direction) as a small dict, or None."""
        friendship = self.existing_with(other.pk)
        if friendship is None:
            return None
        return {
            "id": friendship.pk,
            "status": friendship.status,
            "isRequester": friendship.requester_id == self.actor.pk,
        }

    @transaction.atomic
    def send_request(self, addressee_id):
        if addressee_id is None:
            raise ValidationError({"addresseeId": ["This field is required."]})
        if addressee_id == self.actor.pk:
            raise ValidationError({"addresseeId": ["You cannot send a friend request to yourself."]})
        addressee = self.users.fetch_user(addressee_id)

        existing = self.existing_with(addressee.pk)
        if existing is not None:
            logger.info("Friend request %s -> %s refused: %s exists", self.actor.pk, addressee.pk, existing.status)
            raise Conflict(EXISTING_FRIENDSHIP_MESSAGES[existing.status])

        friendship = self.friendships.create(
            requester=self.actor,
            addressee=addressee,
            status=FriendshipStatus.PENDING,
        )
        self.notifications.notify(
            addressee.pk,
            self.actor,
            NotificationType.FRIEND_REQUEST,
            friendship=friendship,
        )
        return friendship

    @transaction.atomic
    def respond(self, friendship_id, status):
        if status not in RESPONSE_STATUSES:
            raise ValidationError({"status": ["Status must be ACCEPTED or DECLINED."]})
        try:
            friendship = Friendship.objects.select_for_update().get(id=friendship_id)
        except (Friendship.DoesNotExist, DjangoValidationError):
            raise NotFound("Friend request not found.")
        if friendship.addressee_id != self.actor.pk:
            raise AuthorizationDenied("Only the recipient can respond to this friend request.")
        if friendship.status != FriendshipStatus.PENDING:
            raise Conflict("This friend request has already been answered.")

        friendship.status = status
        friendship.save(update_fields=["status", "updated_at"])
        self.notifications.mark_read_for_friendship(self.actor, friendship)
        logger.info("Friend request %s answered %s", friendship.pk, status)
        return friendship

    def friends(self):
        """Return (friendship, friend) pairs for every accepted friendship."""
        rows = (
            Friendship.objects.filter(
                Q(requester=self.actor) | Q(addressee=self.actor),
                status=FriendshipStatus.ACCEPTED,
            )
            .select_related("requester", "addressee")
            .order_by("-updated_at")
        )
        return [
            (row, row.other_user(self.actor.pk))
            for row in rows
        ]

    def pending_requests(self):
        """Incoming requests waiting for the actor's answer, newest first."""
        return self.friendships.list(
            filters={"addressee": self.actor, "status": FriendshipStatus.PENDING},
            order_by=("-created_at",),
            queryset=Friendship.objects.select_related("requester"),
        )

    @transaction.atomic
    def remove(self, friendship_id):
        friendship = self.friendships.fetch("Friendship not found.", id=friendship_id)
        if not friendship.involves(self.actor.pk):
            raise AuthorizationDenied("You are not part of this friendship.")
        friendship.delete()
        logger.info("User %s removed friendship %s", self.actor.pk, friendship_id)
        return friendship_id
