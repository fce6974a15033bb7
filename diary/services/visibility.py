"""
Who may read which diary entries.

An entry is readable when it is PUBLIC or PUBLIC_ANONYMOUS, when the viewer
owns it, or when it is FRIENDS_ONLY and the viewer has an ACCEPTED
friendship with the owner (in either direction). Signed-out viewers only see
the two public levels. Listings additionally drop whatever the viewer hid,
either one entry at a time or every entry by a hidden user.

`scope_for` gathers the relationship facts once per request so listing
endpoints build a single predicate instead of querying per row.
"""

from dataclasses import dataclass

from django.db.models import Q

from diary.exceptions import AuthorizationDenied
from diary.models import (
    DiaryEntry,
    Friendship,
    FriendshipStatus,
    HiddenEntry,
    HiddenUser,
    PrivacyLevel,
)


def viewer_id_of(viewer):
    """Return the viewer's primary key, or None for anonymous/absent viewers."""
    if viewer is None or not getattr(viewer, "is_authenticated", False):
        return None
    return viewer.pk


@dataclass(frozen=True)
class ViewerScope:
    viewer_id: object = None
    friend_ids: frozenset = frozenset()
    hidden_entry_ids: frozenset = frozenset()
    hidden_user_ids: frozenset = frozenset()

    @property
    def is_anonymous(self):
        return self.viewer_id is None


ANONYMOUS_SCOPE = ViewerScope()


class VisibilityService:
    def __init__(
        self,
        friendship_model=Friendship,
        hidden_entry_model=HiddenEntry,
        hidden_user_model=HiddenUser,
    ):
        self.friendship_model = friendship_model
        self.hidden_entry_model = hidden_entry_model
        self.hidden_user_model = hidden_user_model

    def friend_ids(self, viewer):
        viewer_id = viewer_id_of(viewer)
        if viewer_id is None:
            return set()
        rows = self.friendship_model.objects.filter(
            Q(requester_id=viewer_id) | Q(addressee_id=viewer_id),
            status=FriendshipStatus.ACCEPTED,
        ).only("requester", "addressee")
        return {row.other_side(viewer_id) for row in rows}

    def is_friend(self, user_id, other_id):
        if user_id is None or other_id is None or user_id == other_id:
            return False
        return self.friendship_model.objects.filter(
            Q(requester_id=user_id, addressee_id=other_id)
            | Q(requester_id=other_id, addressee_id=user_id),
            status=FriendshipStatus.ACCEPTED,
        ).exists()

    def hidden_entry_ids(self, viewer):
        viewer_id = viewer_id_of(viewer)
        if viewer_id is None:
            return set()
        return set(
            self.hidden_entry_model.objects.filter(user_id=viewer_id).values_list("diary_entry_id", flat=True)
        )

    def hidden_user_ids(self, viewer):
        viewer_id = viewer_id_of(viewer)
        if viewer_id is None:
            return set()
        return set(
            self.hidden_user_model.objects.filter(user_id=viewer_id).values_list("hidden_user_id", flat=True)
        )

    def scope_for(self, viewer):
        viewer_id = viewer_id_of(viewer)
        if viewer_id is None:
            return ANONYMOUS_SCOPE
        return ViewerScope(
            viewer_id=viewer_id,
            friend_ids=frozenset(self.friend_ids(viewer)),
            hidden_entry_ids=frozenset(self.hidden_entry_ids(viewer)),
            hidden_user_ids=frozenset(self.hidden_user_ids(viewer)),
        )

    def visibility_q(self, scope):
        public = Q(privacy_level__in=DiaryEntry.PUBLIC_LEVELS)
        if scope.is_anonymous:
            return public
        return (
            public
            | Q(user_id=scope.viewer_id)
            | Q(privacy_level=PrivacyLevel.FRIENDS_ONLY, user_id__in=list(scope.friend_ids))
        )

    def filter_visible_entries(self, queryset, viewer, exclude_hidden=True, scope=None):
        if scope is None:
            scope = self.scope_for(viewer)
        queryset = queryset.filter(self.visibility_q(scope))
        if not exclude_hidden or scope.is_anonymous:
            return queryset
        if scope.hidden_entry_ids:
            queryset = queryset.exclude(id__in=list(scope.hidden_entry_ids))
        if scope.hidden_user_ids:
            queryset = queryset.exclude(user_id__in=list(scope.hidden_user_ids))
        return queryset

    def can_view_entry(self, viewer, entry):
        if entry.privacy_level in DiaryEntry.PUBLIC_LEVELS:
            return True
        viewer_id = viewer_id_of(viewer)
        if viewer_id is None:
            return False
        if entry.user_id == viewer_id:
            return True
        if entry.privacy_level == PrivacyLevel.FRIENDS_ONLY:
            return self.is_friend(viewer_id, entry.user_id)
        return False

    def ensure_can_view(self, viewer, entry):
        """Return the entry, or raise AuthorizationDenied when it is not readable."""
        if not self.can_view_entry(viewer, entry):
            raise AuthorizationDenied("You do not have permission to view this entry.")
        return entry
