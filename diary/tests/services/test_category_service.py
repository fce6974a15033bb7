from django.test import TestCase

from diary.models import Category
from diary.services import CategoryService


class CategoryServiceTestCase(TestCase):
    def test_defaults_are_seeded_once(self):
        service = CategoryService()
        names = [category.name for category in service.list_categories()]
        self.assertEqual(sorted(Category.DEFAULT_NAMES), names)
        service.list_categories()
        self.assertEqual(Category.objects.count(), len(Category.DEFAULT_NAMES))

    def test_existing_categories_are_left_alone(self):
        Category.objects.create(name="Lichens")
        self.assertEqual([c.name for c in CategoryService().list_categories()], ["Lichens"])
