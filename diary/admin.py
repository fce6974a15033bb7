from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from diary.models import (
    Bookmark,
    BookmarkAlbum,
    Category,
    Comment,
    DiaryEntry,
    Friendship,
    Notification,
    PrivacyLevel,
    User,
)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Stock user admin plus the diary profile fields."""
    fieldsets = BaseUserAdmin.fieldsets + (("Profile", {"fields": ("icon_url", "description")}),)
    list_display = ("username", "email", "is_staff", "date_joined")


class CommentInline(admin.TabularInline):
    """Show comments directly on the diary entry page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ["user", "text", "created_at"]


@admin.register(DiaryEntry)
class DiaryEntryAdmin(admin.ModelAdmin):
    """Admin configuration for diary entries with moderation actions."""
    list_display = ("title", "user", "privacy_level", "category", "taken_at", "likes_display")
    list_filter = ("privacy_level", "category", "created_at")
    search_fields = ("title", "description", "user__username")
    actions = ["make_private"]
    inlines = [CommentInline]

    def likes_display(self, obj):
        count = obj.likes_count
        if count >= 10:
            return format_html('<span style="font-weight:bold;">{} likes</span>', count)
        return str(count)
    likes_display.short_description = "Likes"

    @admin.action(description="Make selected entries private")
    def make_private(self, request, queryset):
        """Withdraw entries from every other viewer."""
        queryset.update(privacy_level=PrivacyLevel.PRIVATE)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("short_text", "user", "diary_entry", "created_at")
    search_fields = ("text", "user__username")

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.text[:50] + "..." if len(obj.text) > 50 else obj.text


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ("requester", "addressee", "status", "created_at")
    list_filter = ("status",)


class BookmarkInline(admin.TabularInline):
    model = Bookmark
    extra = 0


@admin.register(BookmarkAlbum)
class BookmarkAlbumAdmin(admin.ModelAdmin):
    list_display = ("name", "user", "created_at")
    inlines = [BookmarkInline]


admin.site.register(Category)
admin.site.register(Notification)
