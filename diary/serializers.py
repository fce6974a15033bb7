"""
DRF serializers for the JSON API.

Response keys are camelCase; every camelCase field maps onto the snake_case
model attribute through `source=`. Input serializers only validate; the
views hand `validated_data` to the services, which own the writes.
"""

from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import RegexValidator
from rest_framework import serializers

from diary.models import (
    Bookmark,
    BookmarkAlbum,
    Category,
    Comment,
    DiaryEntry,
    Friendship,
    FriendshipStatus,
    HiddenEntry,
    HiddenUser,
    Like,
    Notification,
    PrivacyLevel,
    User,
)
from diary.services.visibility import VisibilityService

TIME_OF_DAY_CHOICES = ("all", "morning", "daytime", "night")

username_validator = RegexValidator(
    regex=r"^\w{3,}$",
    message="Username must consist of at least three alphanumericals",
)


def _checked_password(value):
    try:
        validate_password(value)
    except DjangoValidationError as exc:
        raise serializers.ValidationError(list(exc.messages))
    return value


def _viewer_id(context):
    request = context.get("request")
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return user.pk


class UserSummarySerializer(serializers.ModelSerializer):
    iconUrl = serializers.CharField(source="avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "iconUrl"]


class UserProfileSerializer(serializers.ModelSerializer):
    iconUrl = serializers.CharField(source="avatar_url", read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "iconUrl", "description", "createdAt"]


class MeSerializer(UserProfileSerializer):
    class Meta(UserProfileSerializer.Meta):
        fields = UserProfileSerializer.Meta.fields + ["email"]


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=30, validators=[username_validator])
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_password(self, value):
        return _checked_password(value)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ProfileUpdateSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=30, required=False, validators=[username_validator])
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    iconUrl = serializers.CharField(
        source="icon_url", max_length=500, required=False, allow_blank=True, allow_null=True
    )
    password = serializers.CharField(write_only=True, required=False, trim_whitespace=False)

    def validate_password(self, value):
        return _checked_password(value)


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]


class DiaryEntrySerializer(serializers.ModelSerializer):
    """
    Read and write shape of a diary entry.

    Engagement numbers come from queryset annotations when the entry was
    loaded through `EntryRepo.with_engagement`, otherwise they are counted.
    The author of a PUBLIC_ANONYMOUS entry is shown only to its owner.
    """

    imageUrl = serializers.CharField(
        source="image_url", max_length=500, required=False, allow_blank=True, allow_null=True
    )
    latitude = serializers.FloatField(min_value=-90.0, max_value=90.0)
    longitude = serializers.FloatField(min_value=-180.0, max_value=180.0)
    takenAt = serializers.DateTimeField(source="taken_at")
    privacyLevel = serializers.ChoiceField(
        source="privacy_level", choices=PrivacyLevel.choices, default=PrivacyLevel.PRIVATE
    )
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category = CategorySerializer(read_only=True)
    user = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    likesCount = serializers.SerializerMethodField(method_name="get_likes_count")
    commentsCount = serializers.SerializerMethodField(method_name="get_comments_count")
    isLikedByCurrentUser = serializers.SerializerMethodField(method_name="get_liked_by_viewer")

    class Meta:
        model = DiaryEntry
        fields = [
            "id",
            "title",
            "description",
            "imageUrl",
            "latitude",
            "longitude",
            "takenAt",
            "privacyLevel",
            "categoryId",
            "category",
            "user",
            "createdAt",
            "updatedAt",
            "likesCount",
            "commentsCount",
            "isLikedByCurrentUser",
        ]
        extra_kwargs = {
            "description": {"required": False, "allow_blank": True},
        }

    def get_likes_count(self, obj):
        total = getattr(obj, "likes_total", None)
        return obj.likes.count() if total is None else total

    def get_comments_count(self, obj):
        total = getattr(obj, "comments_total", None)
        return obj.comments.count() if total is None else total

    def get_liked_by_viewer(self, obj):
        liked = getattr(obj, "liked_by_viewer", None)
        if liked is not None:
            return bool(liked)
        viewer_id = _viewer_id(self.context)
        return viewer_id is not None and obj.likes.filter(user_id=viewer_id).exists()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if instance.is_anonymous and instance.user_id != _viewer_id(self.context):
            data["user"] = None
        return data


class EntryFilterSerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True)
    categoryId = serializers.IntegerField(required=False, min_value=1)
    startDate = serializers.DateField(required=False)
    endDate = serializers.DateField(required=False)
    timeOfDay = serializers.ChoiceField(choices=TIME_OF_DAY_CHOICES, required=False)

    def validate(self, attrs):
        start, end = attrs.get("startDate"), attrs.get("endDate")
        if start and end and start > end:
            raise serializers.ValidationError({"endDate": ["endDate must not be before startDate."]})
        return attrs

    def to_filters(self):
        data = self.validated_data
        time_of_day = data.get("timeOfDay")
        return {
            "q": (data.get("q") or "").strip() or None,
            "category_id": data.get("categoryId"),
            "start_date": data.get("startDate"),
            "end_date": data.get("endDate"),
            "time_of_day": None if time_of_day in (None, "all") else time_of_day,
        }


class CommentSerializer(serializers.ModelSerializer):
    diaryEntryId = serializers.UUIDField(source="diary_entry_id", read_only=True)
    user = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "diaryEntryId", "text", "user", "createdAt"]


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(max_length=2000)


class LikeSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)
    diaryEntryId = serializers.UUIDField(source="diary_entry_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Like
        fields = ["id", "userId", "diaryEntryId", "createdAt"]


class LikeToggleSerializer(serializers.Serializer):
    diaryEntryId = serializers.UUIDField()


class FriendshipSerializer(serializers.ModelSerializer):
    requester = UserSummarySerializer(read_only=True)
    addressee = UserSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Friendship
        fields = ["id", "status", "requester", "addressee", "createdAt", "updatedAt"]


class FriendRequestSerializer(serializers.Serializer):
    addresseeId = serializers.IntegerField()


class FriendResponseSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[FriendshipStatus.ACCEPTED, FriendshipStatus.DECLINED])


class NotificationSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source="notification_type", read_only=True)
    actor = UserSummarySerializer(read_only=True)
    isRead = serializers.BooleanField(source="is_read", read_only=True)
    diaryEntryId = serializers.UUIDField(source="diary_entry_id", read_only=True, allow_null=True)
    diaryEntryTitle = serializers.CharField(source="diary_entry.title", read_only=True, default=None)
    commentId = serializers.UUIDField(source="comment_id", read_only=True, allow_null=True)
    friendshipId = serializers.UUIDField(source="friendship_id", read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Notification
        fields = [
            "id",
            "type",
            "actor",
            "isRead",
            "diaryEntryId",
            "diaryEntryTitle",
            "commentId",
            "friendshipId",
            "createdAt",
        ]


class HiddenEntrySerializer(serializers.ModelSerializer):
    diaryEntryId = serializers.UUIDField(source="diary_entry_id", read_only=True)
    title = serializers.SerializerMethodField(method_name="get_title")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = HiddenEntry
        fields = ["id", "diaryEntryId", "title", "createdAt"]

    def get_title(self, obj):
        """The entry title, or None once the entry is no longer readable by whoever hid it."""
        entry = obj.diary_entry
        if not VisibilityService().can_view_entry(obj.user, entry):
            return None
        return entry.title


class HideEntrySerializer(serializers.Serializer):
    entryId = serializers.UUIDField()


class HiddenUserSerializer(serializers.ModelSerializer):
    hiddenUser = UserSummarySerializer(source="hidden_user", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = HiddenUser
        fields = ["id", "hiddenUser", "createdAt"]


class HideUserSerializer(serializers.Serializer):
    hiddenUserId = serializers.IntegerField()


class BookmarkAlbumSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    bookmarksCount = serializers.SerializerMethodField(method_name="get_bookmarks_count")

    class Meta:
        model = BookmarkAlbum
        fields = ["id", "name", "createdAt", "bookmarksCount"]

    def get_bookmarks_count(self, obj):
        total = getattr(obj, "bookmarks_total", None)
        return obj.bookmarks.count() if total is None else total


class AlbumNameSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class BookmarkSerializer(serializers.ModelSerializer):
    albumId = serializers.UUIDField(source="album_id", read_only=True)
    diaryEntry = DiaryEntrySerializer(source="diary_entry", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Bookmark
        fields = ["id", "albumId", "diaryEntry", "createdAt"]


class BookmarkCreateSerializer(serializers.Serializer):
    albumId = serializers.UUIDField()
    diaryEntryId = serializers.UUIDField()
