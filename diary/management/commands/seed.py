"""Management command to seed the database with sample users, entries and social data."""

from datetime import timezone as dt_timezone
from random import choice, randint, sample, uniform
from typing import List

from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction
from faker import Faker

from diary.models import (
    Bookmark,
    BookmarkAlbum,
    Category,
    Comment,
    DiaryEntry,
    Friendship,
    FriendshipStatus,
    Like,
    PrivacyLevel,
    User,
)
from diary.services import CategoryService
from .seed_data import LOCATION_BOX, album_names, comment_phrases, sightings, user_fixtures


class Command(BaseCommand):
    """Management command to seed the database with sample users/entries/data."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = "Password123"
    help = "Seeds the database with sample data"

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Number of users to end up with.")
        parser.add_argument("--entries-per-user", type=int, default=4)

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker("en_GB")

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        CategoryService().ensure_defaults()
        self.create_users(options["users"])
        self.seed_friendships(per_user=3)
        self.seed_entries(per_user=options["entries_per_user"])
        self.seed_likes(max_likes_per_entry=8)
        self.seed_comments(max_comments_per_entry=3)
        self.seed_albums(per_user=2)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < target and attempts < target * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                "username": f"{first_name}{last_name}{randint(1, 999)}".lower()[:30],
                "email": f"{first_name}.{last_name}{randint(1, 999)}@example.org".lower(),
                "first_name": first_name,
                "last_name": last_name,
            })
        self.stdout.write(f"Users: {User.objects.count()}")

    def try_create_user(self, data):
        """Create a user, skipping ones whose username or email is taken."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    password=self.DEFAULT_PASSWORD,
                    description=self.faker.sentence(nb_words=10),
                    **data,
                )
        except IntegrityError:
            return None

    def seed_friendships(self, *, per_user: int = 3) -> None:
        """Create friendships in every status, at most one per unordered pair."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return
        pairs = {
            frozenset(pair)
            for pair in Friendship.objects.values_list("requester_id", "addressee_id")
        }
        rows: List[Friendship] = []
        statuses = [FriendshipStatus.ACCEPTED] * 3 + [FriendshipStatus.PENDING, FriendshipStatus.DECLINED]
        for requester in ids:
            pool = [x for x in ids if x != requester]
            for addressee in sample(pool, min(per_user, len(pool))):
                key = frozenset((requester, addressee))
                if key in pairs:
                    continue
                pairs.add(key)
                rows.append(Friendship(requester_id=requester, addressee_id=addressee, status=choice(statuses)))
        Friendship.objects.bulk_create(rows, ignore_conflicts=True, batch_size=500)
        self.stdout.write(f"Friendships created: {len(rows)}")

    def seed_entries(self, *, per_user: int = 4) -> None:
        categories = {category.name: category for category in Category.objects.all()}
        lat_min, lat_max, lng_min, lng_max = LOCATION_BOX
        rows: List[DiaryEntry] = []
        for user_id in User.objects.values_list("id", flat=True):
            for _ in range(per_user):
                category_name = choice(list(sightings))
                rows.append(DiaryEntry(
                    user_id=user_id,
                    title=choice(sightings[category_name]),
                    description=self.faker.paragraph(nb_sentences=2),
                    latitude=round(uniform(lat_min, lat_max), 6),
                    longitude=round(uniform(lng_min, lng_max), 6),
                    taken_at=self.faker.date_time_between(start_date="-1y", tzinfo=dt_timezone.utc),
                    privacy_level=choice(PrivacyLevel.values),
                    category=categories.get(category_name),
                ))
        DiaryEntry.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Diary entries created: {len(rows)}")

    def _public_entry_ids(self):
        return list(
            DiaryEntry.objects.filter(privacy_level__in=DiaryEntry.PUBLIC_LEVELS).values_list("id", flat=True)
        )

    def seed_likes(self, *, max_likes_per_entry: int = 8) -> None:
        user_ids = list(User.objects.values_list("id", flat=True))
        rows: List[Like] = []
        for entry_id in self._public_entry_ids():
            for user_id in sample(user_ids, randint(0, min(max_likes_per_entry, len(user_ids)))):
                rows.append(Like(user_id=user_id, diary_entry_id=entry_id))
        Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"Likes attempted: {len(rows)}")

    def seed_comments(self, *, max_comments_per_entry: int = 3) -> None:
        user_ids = list(User.objects.values_list("id", flat=True))
        rows: List[Comment] = []
        for entry_id in self._public_entry_ids():
            for _ in range(randint(0, max_comments_per_entry)):
                rows.append(Comment(diary_entry_id=entry_id, user_id=choice(user_ids), text=choice(comment_phrases)))
        Comment.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"Comments created: {len(rows)}")

    def seed_albums(self, *, per_user: int = 2) -> None:
        entry_ids = self._public_entry_ids()
        bookmarks: List[Bookmark] = []
        with transaction.atomic():
            for user in User.objects.all():
                for name in sample(album_names, min(per_user, len(album_names))):
                    album = BookmarkAlbum.objects.create(user=user, name=name)
                    for entry_id in sample(entry_ids, min(randint(0, 5), len(entry_ids))):
                        bookmarks.append(Bookmark(album=album, diary_entry_id=entry_id))
            Bookmark.objects.bulk_create(bookmarks, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"Bookmarks attempted: {len(bookmarks)}")
