"""Likes, friendships, hidden lists and notifications. All need a signed-in user."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from diary.permissions import IsSignedIn
from diary.serializers import (
    FriendRequestSerializer,
    FriendResponseSerializer,
    FriendshipSerializer,
    HiddenEntrySerializer,
    HiddenUserSerializer,
    HideEntrySerializer,
    HideUserSerializer,
    LikeSerializer,
    LikeToggleSerializer,
    NotificationSerializer,
    UserSummarySerializer,
)
from diary.services import DiaryEntryService, FriendshipService, HidingService, NotificationService


@api_view(["POST"])
@permission_classes([IsSignedIn])
def toggle_like(request):
    serializer = LikeToggleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    liked, like = DiaryEntryService().toggle_like(request.user, serializer.validated_data["diaryEntryId"])
    if not liked:
        return Response({"message": "Like removed.", "liked": False})
    return Response(
        {"message": "Entry liked.", "liked": True, "like": LikeSerializer(like).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
@permission_classes([IsSignedIn])
def friend_list(request):
    friends = [
        {**UserSummarySerializer(friend).data, "friendshipId": str(friendship.pk)}
        for friendship, friend in FriendshipService(request.user).friends()
    ]
    return Response({"friends": friends})


@api_view(["DELETE"])
@permission_classes([IsSignedIn])
def friend_detail(request, friendship_id):
    FriendshipService(request.user).remove(friendship_id)
    return Response({"message": "Friend removed."})


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def friend_requests(request):
    service = FriendshipService(request.user)
    if request.method == "GET":
        return Response({"requests": FriendshipSerializer(service.pending_requests(), many=True).data})

    serializer = FriendRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    friendship = service.send_request(serializer.validated_data["addresseeId"])
    return Response(
        {"message": "Friend request sent.", "friendship": FriendshipSerializer(friendship).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["PUT"])
@permission_classes([IsSignedIn])
def friend_request_detail(request, friendship_id):
    serializer = FriendResponseSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    friendship = FriendshipService(request.user).respond(friendship_id, serializer.validated_data["status"])
    return Response({"message": "Friend request updated.", "friendship": FriendshipSerializer(friendship).data})


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def hidden_entries(request):
    service = HidingService(request.user)
    if request.method == "GET":
        return Response({"hiddenEntries": HiddenEntrySerializer(service.list_hidden_entries(), many=True).data})

    serializer = HideEntrySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    hidden, created = service.hide_entry(serializer.validated_data["entryId"])
    if not created:
        return Response({"message": "Entry is already hidden.", "hiddenEntry": HiddenEntrySerializer(hidden).data})
    return Response(
        {"message": "Entry hidden.", "hiddenEntry": HiddenEntrySerializer(hidden).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["DELETE"])
@permission_classes([IsSignedIn])
def hidden_entry_detail(request, hidden_id):
    HidingService(request.user).unhide_entry(hidden_id)
    return Response({"message": "Entry is visible again."})


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def hidden_users(request):
    service = HidingService(request.user)
    if request.method == "GET":
        return Response({"hiddenUsers": HiddenUserSerializer(service.list_hidden_users(), many=True).data})

    serializer = HideUserSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    hidden, created = service.hide_user(serializer.validated_data["hiddenUserId"])
    if not created:
        return Response({"message": "User is already hidden.", "hiddenUser": HiddenUserSerializer(hidden).data})
    return Response(
        {"message": "User hidden.", "hiddenUser": HiddenUserSerializer(hidden).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["DELETE"])
@permission_classes([IsSignedIn])
def hidden_user_detail(request, hidden_id):
    HidingService(request.user).unhide_user(hidden_id)
    return Response({"message": "User is visible again."})


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def notifications(request):
    if request.method == "POST":
        return _mark_all_read(request.user)
    items, unread = NotificationService().inbox(request.user)
    return Response({"notifications": NotificationSerializer(items, many=True).data, "unreadCount": unread})


@api_view(["POST"])
@permission_classes([IsSignedIn])
def mark_notifications_read(request):
    return _mark_all_read(request.user)


def _mark_all_read(user):
    updated = NotificationService().mark_all_read(user)
    return Response({"message": "Notifications marked as read.", "updated": updated})
