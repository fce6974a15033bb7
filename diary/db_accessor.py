from typing import Any, Mapping, Optional, Sequence, Type

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Model, QuerySet

from diary.exceptions import NotFound


class DB_Accessor:
    """Thin wrapper around a model's default manager shared by the repositories."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def queryset(self) -> QuerySet:
        return self.model.objects.all()

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        queryset: Optional[QuerySet] = None,
    ) -> QuerySet:
        """Return a filtered, ordered and optionally truncated queryset."""
        qs = self.queryset() if queryset is None else queryset
        if filters:
            qs = qs.filter(**filters)
        if order_by:
            qs = qs.order_by(*order_by)
        if limit is not None:
            qs = qs[: max(0, int(limit))]
        return qs

    def fetch(self, message: str = "Not found.", **lookup: Any) -> Model:
        """Return the single object matching lookup or raise NotFound."""
        try:
            return self.queryset().get(**lookup)
        except (self.model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            raise NotFound(message)

    def create(self, **data: Any) -> Model:
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return how many rows went."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
