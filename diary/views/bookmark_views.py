"""Bookmark albums and the bookmarks inside them, always scoped to the signed-in user."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from diary.permissions import IsSignedIn
from diary.serializers import (
    AlbumNameSerializer,
    BookmarkAlbumSerializer,
    BookmarkCreateSerializer,
    BookmarkSerializer,
)
from diary.services import BookmarkService


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def album_list(request):
    service = BookmarkService(request.user)
    if request.method == "GET":
        return Response({"bookmarkAlbums": BookmarkAlbumSerializer(service.list_albums(), many=True).data})

    serializer = AlbumNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    album = service.create_album(serializer.validated_data["name"])
    return Response(
        {"message": "Album created.", "bookmarkAlbum": BookmarkAlbumSerializer(album).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["PUT", "DELETE"])
@permission_classes([IsSignedIn])
def album_detail(request, album_id):
    service = BookmarkService(request.user)
    if request.method == "DELETE":
        service.delete_album(album_id)
        return Response({"message": "Album deleted."})

    serializer = AlbumNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    album = service.rename_album(album_id, serializer.validated_data["name"])
    return Response({"message": "Album renamed.", "bookmarkAlbum": BookmarkAlbumSerializer(album).data})


@api_view(["GET", "POST"])
@permission_classes([IsSignedIn])
def bookmark_list(request):
    service = BookmarkService(request.user)
    if request.method == "GET":
        album_id = request.query_params.get("albumId")
        if not album_id:
            raise ValidationError({"albumId": ["This query parameter is required."]})
        bookmarks = service.list_bookmarks(album_id)
        return Response(
            {"bookmarks": BookmarkSerializer(bookmarks, many=True, context={"request": request}).data}
        )

    serializer = BookmarkCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    bookmark = service.add_bookmark(
        serializer.validated_data["albumId"],
        serializer.validated_data["diaryEntryId"],
    )
    return Response(
        {"message": "Entry saved.", "bookmark": BookmarkSerializer(bookmark, context={"request": request}).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["DELETE"])
@permission_classes([IsSignedIn])
def bookmark_detail(request, bookmark_id):
    BookmarkService(request.user).remove_bookmark(bookmark_id)
    return Response({"message": "Bookmark removed."})
