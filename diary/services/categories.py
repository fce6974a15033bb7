"""Category lookup; the default set is created the first time anyone asks."""

import logging

from django.db import transaction

from diary.models import Category

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, category_model=Category):
        self.category_model = category_model

    @transaction.atomic
    def ensure_defaults(self):
        if self.category_model.objects.exists():
            return 0
        created = 0
        for name in self.category_model.DEFAULT_NAMES:
            _, was_created = self.category_model.objects.get_or_create(name=name)
            created += int(was_created)
        logger.info("Seeded %d default categories", created)
        return created

    def list_categories(self):
        self.ensure_defaults()
        return list(self.category_model.objects.order_by("name"))
