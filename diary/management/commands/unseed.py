from django.core.management.base import BaseCommand
from django.db import transaction

from diary.models import User


class Command(BaseCommand):
    """
    Remove seeded sample data.

    Deletes every non-staff user; their entries, friendships, likes,
    comments, albums and notifications cascade with them. Staff accounts and
    categories are kept.
    """

    help = "Removes seeded sample data"

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_users = User.objects.filter(is_staff=False).count()
            User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_users} non-staff users and related data."))
