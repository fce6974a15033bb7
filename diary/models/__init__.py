from .user import User
from .category import Category
from .diary_entry import DiaryEntry, PrivacyLevel
from .friendship import Friendship, FriendshipStatus
from .hidden_entry import HiddenEntry
from .hidden_user import HiddenUser
from .like import Like
from .comment import Comment
from .notification import Notification, NotificationType
from .bookmark_album import BookmarkAlbum
from .bookmark import Bookmark

__all__ = [
    "User",
    "Category",
    "DiaryEntry",
    "PrivacyLevel",
    "Friendship",
    "FriendshipStatus",
    "HiddenEntry",
    "HiddenUser",
    "Like",
    "Comment",
    "Notification",
    "NotificationType",
    "BookmarkAlbum",
    "Bookmark",
]
