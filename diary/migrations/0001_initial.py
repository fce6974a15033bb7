import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('username', models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message='Username must consist of at least three alphanumericals', regex='^\\w{3,}$')])),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('icon_url', models.CharField(blank=True, max_length=500, null=True)),
                ('description', models.TextField(blank=True, help_text='short profile text shown on the user page', max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'ordering': ['username'],
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
            ],
            options={
                'db_table': 'category',
                'ordering': ['name'],
                'verbose_name_plural': 'categories',
            },
        ),
        migrations.CreateModel(
            name='DiaryEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='', max_length=4000)),
                ('image_url', models.CharField(blank=True, max_length=500, null=True)),
                ('latitude', models.FloatField(validators=[django.core.validators.MinValueValidator(-90.0), django.core.validators.MaxValueValidator(90.0)])),
                ('longitude', models.FloatField(validators=[django.core.validators.MinValueValidator(-180.0), django.core.validators.MaxValueValidator(180.0)])),
                ('taken_at', models.DateTimeField()),
                ('privacy_level', models.CharField(choices=[('PRIVATE', 'Private'), ('FRIENDS_ONLY', 'Friends only'), ('PUBLIC', 'Public'), ('PUBLIC_ANONYMOUS', 'Public (anonymous)')], default='PRIVATE', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='diary_entries', to='diary.category')),
                ('user', models.ForeignKey(db_column='user_id', on_delete=django.db.models.deletion.CASCADE, related_name='diary_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'diary_entry',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-created_at'], name='diary_entry_user_id_7c1a52_idx'),
                    models.Index(fields=['privacy_level'], name='diary_entry_privacy_0f2e4d_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('text', models.TextField(max_length=2000)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('diary_entry', models.ForeignKey(db_column='diary_entry_id', on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='diary.diaryentry')),
                ('user', models.ForeignKey(db_column='user_id', on_delete=django.db.models.deletion.CASCADE, related_name='comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'comment',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='Friendship',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('ACCEPTED', 'Accepted'), ('DECLINED', 'Declined')], default='PENDING', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('addressee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='friend_requests_received', to=settings.AUTH_USER_MODEL)),
                ('requester', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='friend_requests_sent', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'friendship',
                'indexes': [
                    models.Index(fields=['requester', 'status'], name='friendship_request_3b9d0e_idx'),
                    models.Index(fields=['addressee', 'status'], name='friendship_address_8e41c7_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('requester', 'addressee'), name='uniq_friendship_requester_addressee'),
                    models.CheckConstraint(condition=models.Q(('requester', models.F('addressee')), _negated=True), name='chk_friendship_not_self'),
                ],
            },
        ),
        migrations.CreateModel(
            name='HiddenEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('diary_entry', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hidden_by', to='diary.diaryentry')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hidden_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'hidden_entry',
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'diary_entry'), name='uniq_hidden_entry_user_entry'),
                ],
            },
        ),
        migrations.CreateModel(
            name='HiddenUser',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('hidden_user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hidden_by', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='hidden_users', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'hidden_user',
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'hidden_user'), name='uniq_hidden_user_pair'),
                    models.CheckConstraint(condition=models.Q(('user', models.F('hidden_user')), _negated=True), name='chk_hidden_user_not_self'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Like',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('diary_entry', models.ForeignKey(db_column='diary_entry_id', on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='diary.diaryentry')),
                ('user', models.ForeignKey(db_column='user_id', on_delete=django.db.models.deletion.CASCADE, related_name='likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'like',
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'diary_entry'), name='uniq_like_user_entry'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BookmarkAlbum',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookmark_albums', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'bookmark_album',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user'], name='bookmark_al_user_id_5d2f90_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Bookmark',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('album', models.ForeignKey(db_column='bookmark_album_id', on_delete=django.db.models.deletion.CASCADE, related_name='bookmarks', to='diary.bookmarkalbum')),
                ('diary_entry', models.ForeignKey(db_column='diary_entry_id', on_delete=django.db.models.deletion.CASCADE, related_name='bookmarks', to='diary.diaryentry')),
            ],
            options={
                'db_table': 'bookmark',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['album'], name='bookmark_bookmar_1e7a3c_idx'),
                    models.Index(fields=['diary_entry'], name='bookmark_diary_e_9c4b21_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('album', 'diary_entry'), name='uniq_bookmark_album_entry'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Notification',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('notification_type', models.CharField(choices=[('FRIEND_REQUEST', 'Friend request'), ('NEW_LIKE', 'New like'), ('NEW_COMMENT', 'New comment')], max_length=20)),
                ('is_read', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('actor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_notifications', to=settings.AUTH_USER_MODEL)),
                ('comment', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to='diary.comment')),
                ('diary_entry', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to='diary.diaryentry')),
                ('friendship', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to='diary.friendship')),
                ('recipient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notifications', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'notification',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['recipient', 'is_read'], name='notificatio_recipie_4f8a62_idx'),
                ],
            },
        ),
    ]
