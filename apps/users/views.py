"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.cohosts.permissions import IsHost

from .serializers import UserLookupSerializer, UserSerializer

User = get_user_model()


class MeView(APIView):
    """Profile of the authenticated user.

    - `GET` returns the profile with the derived role
    - `PATCH` updates first and last name
    """

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response(UserSerializer(request.user).data)

    def patch(self, request):  # type: ignore
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class BecomeHostView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        request.user.become_host()
        return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)


class UserSearchView(APIView):
    """Email lookup used by hosts to pick a co-host. `?q=` of at least 3 characters."""

    permission_classes = [IsHost]
    max_results = 10

    def get(self, request):  # type: ignore
        query = request.query_params.get("q", "").strip()
        if len(query) < 3:
            return Response([])
        users = (
            User.objects.filter(email__icontains=query, is_active=True)
            .exclude(pk=request.user.pk)
            .order_by("email")[: self.max_results]
        )
        return Response(UserLookupSerializer(users, many=True).data)
