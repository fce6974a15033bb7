from django.urls import path

from diary.views import auth_views, bookmark_views, entry_views, social_views, user_views

urlpatterns = [
    path("auth/register", auth_views.register, name="auth-register"),
    path("auth/login", auth_views.login, name="auth-login"),
    path("auth/logout", auth_views.logout, name="auth-logout"),
    path("auth/me", auth_views.me, name="auth-me"),

    path("entries", entry_views.entry_list, name="entry-list"),
    path("entries/search", entry_views.entry_search, name="entry-search"),
    path("entries/my", entry_views.my_entries, name="entry-mine"),
    path("entries/<str:entry_id>", entry_views.entry_detail, name="entry-detail"),
    path("entries/<str:entry_id>/comments", entry_views.entry_comments, name="entry-comments"),
    path("comments/<str:comment_id>", entry_views.comment_detail, name="comment-detail"),

    path("likes", social_views.toggle_like, name="like-toggle"),

    path("friends", social_views.friend_list, name="friend-list"),
    path("friends/requests", social_views.friend_requests, name="friend-requests"),
    path("friends/requests/<str:friendship_id>", social_views.friend_request_detail, name="friend-request-detail"),
    path("friends/<str:friendship_id>", social_views.friend_detail, name="friend-detail"),

    path("hidden-entries", social_views.hidden_entries, name="hidden-entry-list"),
    path("hidden-entries/<str:hidden_id>", social_views.hidden_entry_detail, name="hidden-entry-detail"),
    path("hidden-users", social_views.hidden_users, name="hidden-user-list"),
    path("hidden-users/<str:hidden_id>", social_views.hidden_user_detail, name="hidden-user-detail"),

    path("notifications", social_views.notifications, name="notification-list"),
    path("notifications/mark-as-read", social_views.mark_notifications_read, name="notification-mark-read"),

    path("bookmark-albums", bookmark_views.album_list, name="album-list"),
    path("bookmark-albums/<str:album_id>", bookmark_views.album_detail, name="album-detail"),
    path("bookmarks", bookmark_views.bookmark_list, name="bookmark-list"),
    path("bookmarks/<str:bookmark_id>", bookmark_views.bookmark_detail, name="bookmark-detail"),

    path("users/search", user_views.user_search, name="user-search"),
    path("users/<int:user_id>", user_views.user_detail, name="user-detail"),
    path("users/<int:user_id>/entries", user_views.user_entries, name="user-entries"),

    path("categories", user_views.category_list, name="category-list"),
]
