import shutil
import tempfile
from datetime import datetime, timedelta, timezone as dt_timezone

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.utils import timezone
from PIL import Image

from accounts import services
from accounts.models import Profile
from core.results import NOT_FOUND, VALIDATION
from core.tests.helpers import make_user, make_lookups, make_session, make_image_file
from kudos.models import Kudos
from kudos.services import add_kudos_points


class TestNewGamerSetup(TestCase):
    def test_profile_and_kudos_are_created(self):
        user = make_user('fresh')

        assert Profile.objects.filter(user=user).exists()
        assert Kudos.objects.get(user=user).points == 0

    def test_saving_again_does_not_duplicate(self):
        user = make_user('fresh')
        user.first_name = 'Fresh'
        user.save()

        assert Profile.objects.filter(user=user).count() == 1
        assert Kudos.objects.filter(user=user).count() == 1


class TestProfiles(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = make_user('alice')
        cls.friend = make_user('bob')
        cls.user.friends.add(cls.friend)
        add_kudos_points(cls.user, 12)

    def test_my_profile(self):
        context = services.get_my_profile(self.user.pk)

        assert context['profile_user'] == self.user
        assert context['kudos_points'] == 12
        assert context['friends'] == [self.friend]

    def test_user_profile_by_username(self):
        context = services.get_user_profile('bob')

        assert context['profile_user'] == self.friend
        # Friendship only goes one way
        assert context['friends'] == []

    def test_unknown_user(self):
        assert services.get_user_profile('nobody') is None
        assert services.get_my_profile(0) is None

    def test_upcoming_sessions_only(self):
        platform, session_type, duration = make_lookups()
        now = timezone.now()
        upcoming = make_session(self.user, platform, session_type, duration, scheduled=now + timedelta(days=1))
        make_session(self.user, platform, session_type, duration, scheduled=now - timedelta(days=1))

        context = services.get_my_profile(self.user.pk)

        assert context['upcoming_sessions'] == [upcoming]

    def test_edit_form_starts_with_current_values(self):
        self.user.profile.bio = 'Healer main'
        self.user.profile.save()

        form = services.get_edit_profile_model(self.user.pk)

        assert form.initial['bio'] == 'Healer main'
        assert form.initial['time_zone'] == 'UTC'

    def test_edit_profile(self):
        result = services.edit_profile(self.user.pk, {
            'first_name': 'Alice',
            'last_name': 'Liddell',
            'email': 'alice@example.org',
            'time_zone': 'Europe/London',
            'bio': 'Tank',
        })

        assert result
        self.user.refresh_from_db()
        assert self.user.time_zone == 'Europe/London'
        assert self.user.email == 'alice@example.org'
        assert Profile.objects.get(user=self.user).bio == 'Tank'

    def test_edit_missing_profile(self):
        result = services.edit_profile(0, {})
        assert result.kind == NOT_FOUND

    def test_user_menu_information(self):
        menu = services.get_user_menu_information(self.user.pk)

        assert menu == {
            'username': 'alice',
            'avatar_url': None,
            'kudos_points': 12,
            'friend_count': 1,
            'upcoming_session_count': 0,
        }


class TestAddFriend(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = make_user('alice')
        cls.other = make_user('bob')

    def test_adds_friend_one_way(self):
        result = services.add_friend(self.user, 'bob')

        assert result
        assert self.user.friends.filter(pk=self.other.pk).exists()
        assert not self.other.friends.filter(pk=self.user.pk).exists()

    def test_unknown_user(self):
        result = services.add_friend(self.user, 'nobody')

        assert result.kind == NOT_FOUND
        assert result.error == "No user called nobody was found"

    def test_cannot_add_yourself(self):
        assert services.add_friend(self.user, 'alice').kind == VALIDATION

    def test_cannot_add_twice(self):
        services.add_friend(self.user, 'bob')

        result = services.add_friend(self.user, 'bob')

        assert result.error == "bob is already your friend"


class TestUsersJson(TestCase):
    @classmethod
    def setUpTestData(cls):
        for username in ['dragon', 'Draco', 'drake', 'elf']:
            make_user(username)
        make_user('drifter', is_active=False)

    def test_matches_start_of_username_ignoring_case(self):
        users = services.get_users_json('DR')

        assert [u['username'] for u in users] == ['Draco', 'dragon', 'drake']
        assert users[0] == {'username': 'Draco', 'avatar': None}

    def test_empty_term(self):
        assert services.get_users_json('') == []
        assert services.get_users_json('   ') == []

    def test_result_size_is_limited(self):
        for i in range(services.USER_SEARCH_LIMIT + 2):
            make_user(f'zz{i:02d}')

        assert len(services.get_users_json('zz')) == services.USER_SEARCH_LIMIT


class TestImageUpload(TestCase):
    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)
        settings_override = override_settings(MEDIA_ROOT=self.media_root)
        settings_override.enable()
        self.addCleanup(settings_override.disable)
        self.user = make_user('painter')

    def test_big_images_are_shrunk_to_jpeg(self):
        result = services.process_image_upload(make_image_file(size=(600, 400)), self.user.pk)

        assert result
        profile = Profile.objects.get(user=self.user)
        assert profile.avatar.name.endswith('.jpg')
        with Image.open(profile.avatar.path) as stored:
            assert stored.format == 'JPEG'
            assert max(stored.size) <= 256

    def test_small_images_are_kept(self):
        result = services.process_image_upload(make_image_file(size=(100, 100)), self.user.pk)

        assert result
        with Image.open(Profile.objects.get(user=self.user).avatar.path) as stored:
            assert stored.size == (100, 100)

    def test_not_an_image(self):
        upload = SimpleUploadedFile('notes.png', b'definitely not a picture', content_type='image/png')

        result = services.process_image_upload(upload, self.user.pk)

        assert result.kind == VALIDATION
        assert result.error == "The selected file is not a valid image."
        assert not Profile.objects.get(user=self.user).avatar

    @override_settings(MAX_AVATAR_UPLOAD_BYTES=10)
    def test_too_big(self):
        result = services.process_image_upload(make_image_file(), self.user.pk)

        assert result.kind == VALIDATION
        assert result.error.startswith("The image is too big.")
