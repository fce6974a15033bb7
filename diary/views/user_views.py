"""User search, profiles, a user's entries and the category list."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from diary.permissions import IsSignedIn
from diary.serializers import CategorySerializer, DiaryEntrySerializer, UserProfileSerializer, UserSummarySerializer
from diary.services import CategoryService, DiaryEntryService, UserService


@api_view(["GET"])
@permission_classes([IsSignedIn])
def user_search(request):
    users = UserService().search(request.user, request.query_params.get("q"))
    return Response({"users": UserSummarySerializer(users, many=True).data})


@api_view(["GET"])
@permission_classes([IsSignedIn])
def user_detail(request, user_id):
    user, friendship = UserService().profile(request.user, user_id)
    data = UserProfileSerializer(user).data
    data["friendshipStatus"] = friendship["status"] if friendship else None
    data["friendship"] = friendship
    return Response({"user": data})


@api_view(["GET"])
def user_entries(request, user_id):
    author = UserService().fetch(user_id)
    entries = DiaryEntryService().list_for_author(request.user, author)
    return Response({"entries": DiaryEntrySerializer(entries, many=True, context={"request": request}).data})


@api_view(["GET"])
def category_list(request):
    return Response({"categories": CategorySerializer(CategoryService().list_categories(), many=True).data})
