"""Register, log in, log out and read or edit the signed-in account."""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from diary.permissions import IsSignedIn
from diary.serializers import LoginSerializer, MeSerializer, ProfileUpdateSerializer, RegisterSerializer
from diary.services import UserService
from diary.tokens import clear_auth_cookie, issue_token, set_auth_cookie

logger = logging.getLogger(__name__)


@api_view(["POST"])
def register(request):
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = UserService().register(**serializer.validated_data)
    return Response(
        {"message": "User registered successfully.", "user": MeSerializer(user).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = UserService().authenticate(**serializer.validated_data)
    response = Response({"message": "Login successful.", "user": MeSerializer(user).data})
    set_auth_cookie(response, issue_token(user))
    logger.info("User %s logged in", user.pk)
    return response


@api_view(["POST"])
def logout(request):
    return clear_auth_cookie(Response({"message": "Logged out."}))


@api_view(["GET", "PUT"])
@permission_classes([IsSignedIn])
def me(request):
    if request.method == "GET":
        return Response({"user": MeSerializer(request.user).data})

    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = UserService().update_profile(request.user, serializer.validated_data)
    return Response({"message": "Profile updated.", "user": MeSerializer(user).data})
