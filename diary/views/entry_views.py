"""
Diary entry endpoints.

Reads are open to signed-out visitors and filtered by the visibility rules;
writes need a signed-in owner.
"""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from diary.permissions import IsSignedIn, IsSignedInOrReadOnly
from diary.serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    DiaryEntrySerializer,
    EntryFilterSerializer,
)
from diary.services import CommentService, DiaryEntryService


def _entries_response(request, entries):
    data = DiaryEntrySerializer(entries, many=True, context={"request": request}).data
    return Response({"entries": data})


@api_view(["GET", "POST"])
@permission_classes([IsSignedInOrReadOnly])
def entry_list(request):
    service = DiaryEntryService()
    if request.method == "GET":
        filters = EntryFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        return _entries_response(request, service.list_visible(request.user, **filters.to_filters()))

    serializer = DiaryEntrySerializer(data=request.data, context={"request": request})
    serializer.is_valid(raise_exception=True)
    entry = service.create_entry(request.user, serializer.validated_data)
    return Response(
        {"message": "Diary entry created.", "entry": DiaryEntrySerializer(entry, context={"request": request}).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
def entry_search(request):
    return _entries_response(request, DiaryEntryService().search(request.user, request.query_params.get("q")))


@api_view(["GET"])
@permission_classes([IsSignedIn])
def my_entries(request):
    return _entries_response(request, DiaryEntryService().list_mine(request.user))


@api_view(["GET", "PUT", "PATCH", "DELETE"])
@permission_classes([IsSignedInOrReadOnly])
def entry_detail(request, entry_id):
    service = DiaryEntryService()
    context = {"request": request}

    if request.method == "GET":
        entry = service.fetch_visible(request.user, entry_id)
        return Response({"entry": DiaryEntrySerializer(entry, context=context).data})

    if request.method == "DELETE":
        service.delete_entry(request.user, entry_id)
        return Response({"message": "Diary entry deleted."})

    entry = service.fetch_owned(request.user, entry_id)
    serializer = DiaryEntrySerializer(
        entry, data=request.data, partial=request.method == "PATCH", context=context
    )
    serializer.is_valid(raise_exception=True)
    entry = service.update_entry(request.user, entry.pk, serializer.validated_data)
    return Response({"message": "Diary entry updated.", "entry": DiaryEntrySerializer(entry, context=context).data})


@api_view(["GET", "POST"])
@permission_classes([IsSignedInOrReadOnly])
def entry_comments(request, entry_id):
    service = CommentService()
    if request.method == "GET":
        comments = service.list_for_entry(request.user, entry_id)
        return Response({"comments": CommentSerializer(comments, many=True).data})

    serializer = CommentCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    comment = service.create_comment(request.user, entry_id, serializer.validated_data["text"])
    return Response(
        {"message": "Comment added.", "comment": CommentSerializer(comment).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["DELETE"])
@permission_classes([IsSignedIn])
def comment_detail(request, comment_id):
    CommentService().delete_comment(request.user, comment_id)
    return Response({"message": "Comment deleted."})
