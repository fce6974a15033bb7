from .visibility import ViewerScope, VisibilityService
from .notifications import NotificationService
from .diary_entries import DiaryEntryService
from .comments import CommentService
from .friendships import FriendshipService
from .hiding import HidingService
from .bookmarks import BookmarkService
from .users import UserService
from .categories import CategoryService

__all__ = [
    "ViewerScope",
    "VisibilityService",
    "NotificationService",
    "DiaryEntryService",
    "CommentService",
    "FriendshipService",
    "HidingService",
    "BookmarkService",
    "UserService",
    "CategoryService",
]
