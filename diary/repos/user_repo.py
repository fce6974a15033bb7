"""Repository helpers for looking up users."""

from typing import Iterable, Optional

from django.db.models import QuerySet

from diary.db_accessor import DB_Accessor
from diary.models import User


class UserRepo(DB_Accessor):
    def __init__(self) -> None:
        super().__init__(User)

    def queryset(self) -> QuerySet:
        return self.model.objects.filter(is_active=True)

    def search_by_username(
        self,
        term: str,
        *,
        exclude_ids: Iterable[int] = (),
        limit: Optional[int] = None,
    ) -> QuerySet:
        """Case-insensitive username substring match, excluding the given ids."""
        qs = self.queryset().filter(username__icontains=term).exclude(id__in=list(exclude_ids))
        return self.list(queryset=qs, order_by=("username",), limit=limit)

    def fetch_user(self, user_id) -> User:
        return self.fetch("User not found.", id=user_id)

    def email_taken(self, email: str, *, exclude_id=None) -> bool:
        qs = self.model.objects.filter(email__iexact=email)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    def username_taken(self, username: str, *, exclude_id=None) -> bool:
        qs = self.model.objects.filter(username__iexact=username)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()
