"""Repository helpers for fetching diary entries."""

from datetime import date
from typing import Any, Dict, Optional, Sequence

from django.db.models import BooleanField, Count, Exists, OuterRef, Q, QuerySet, Value

from diary.db_accessor import DB_Accessor
from diary.models import DiaryEntry, Like

# Hour ranges in the active time zone, end exclusive.
TIME_OF_DAY_HOURS = {
    "morning": (5, 10),
    "daytime": (10, 16),
    "night": (16, 5),
}


def time_of_day_q(bucket: str) -> Q:
    """Return a filter for entries whose taken_at hour falls in the bucket."""
    start, end = TIME_OF_DAY_HOURS[bucket]
    if start < end:
        return Q(taken_at__hour__gte=start, taken_at__hour__lt=end)
    return Q(taken_at__hour__gte=start) | Q(taken_at__hour__lt=end)


class EntryRepo(DB_Accessor):
    """Repository for DiaryEntry queries (listing, search, engagement counts)."""

    def __init__(self) -> None:
        super().__init__(DiaryEntry)

    def queryset(self) -> QuerySet:
        return self.model.objects.select_related("user", "category")

    def with_engagement(self, qs: QuerySet, viewer_id=None) -> QuerySet:
        """Annotate likes_total, comments_total and liked_by_viewer."""
        qs = qs.annotate(
            likes_total=Count("likes", distinct=True),
            comments_total=Count("comments", distinct=True),
        )
        if viewer_id is None:
            return qs.annotate(liked_by_viewer=Value(False, output_field=BooleanField()))
        return qs.annotate(
            liked_by_viewer=Exists(
                Like.objects.filter(diary_entry_id=OuterRef("pk"), user_id=viewer_id)
            )
        )

    def apply_filters(
        self,
        qs: QuerySet,
        *,
        q: Optional[str] = None,
        category_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        time_of_day: Optional[str] = None,
    ) -> QuerySet:
        """Narrow qs by keyword, category, taken_at date range and hour bucket."""
        filters: Dict[str, Any] = {}
        if category_id is not None:
            filters["category_id"] = category_id
        if start_date is not None:
            filters["taken_at__date__gte"] = start_date
        if end_date is not None:
            filters["taken_at__date__lte"] = end_date
        if filters:
            qs = qs.filter(**filters)

        if q:
            qs = qs.filter(Q(title__icontains=q) | Q(description__icontains=q))
        if time_of_day:
            qs = qs.filter(time_of_day_q(time_of_day))
        return qs

    def list_for_user(
        self,
        user_id: int,
        *,
        order_by: Sequence[str] = ("-created_at",),
    ) -> QuerySet:
        """Return entries written by one user, newest first."""
        return self.list(filters={"user_id": user_id}, order_by=order_by)

    def fetch_entry(self, entry_id) -> DiaryEntry:
        return self.fetch("Diary entry not found.", id=entry_id)
