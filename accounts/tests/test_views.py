from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse

from accounts.models import User
from core.tests.helpers import make_user


class TestProfileView(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = make_user('alice')
        cls.other = make_user('bob')

    def test_own_profile(self):
        self.client.force_login(self.user)

        response = self.client.get(reverse('profile', kwargs={'username': 'alice'}))

        self.assertTemplateUsed(response, 'accounts/my_profile.html')

    def test_other_profile(self):
        self.client.force_login(self.user)

        response = self.client.get(reverse('profile', kwargs={'username': 'bob'}))

        self.assertTemplateUsed(response, 'accounts/user_profile.html')
        assert response.context['is_friend'] is False

    def test_anonymous_visitor(self):
        response = self.client.get(reverse('profile', kwargs={'username': 'alice'}))

        self.assertTemplateUsed(response, 'accounts/user_profile.html')

    def test_unknown_user(self):
        response = self.client.get(reverse('profile', kwargs={'username': 'nobody'}))
        assert response.status_code == 404

    def test_header_shows_user_menu(self):
        self.client.force_login(self.user)

        response = self.client.get(reverse('profile', kwargs={'username': 'bob'}))

        self.assertContains(response, '0 kudos</span>')
        self.assertTemplateUsed(response, 'accounts/partials/user_menu.html')


class TestEditProfileView(TestCase):
    def setUp(self):
        self.user = make_user('alice')
        self.client.force_login(self.user)

    def test_get(self):
        response = self.client.get(reverse('edit_profile'))

        assert response.status_code == 200
        assert response.context['form'].initial['email'] == 'alice@example.com'

    def test_post_saves_and_redirects(self):
        response = self.client.post(reverse('edit_profile'), {
            'first_name': 'Alice',
            'last_name': '',
            'email': 'Alice@Example.org',
            'time_zone': 'Asia/Tokyo',
            'bio': 'Support',
        })

        self.assertRedirects(response, reverse('profile', kwargs={'username': 'alice'}))
        self.user.refresh_from_db()
        assert self.user.time_zone == 'Asia/Tokyo'
        assert self.user.email == 'alice@example.org'

    def test_unknown_time_zone_is_rejected(self):
        response = self.client.post(reverse('edit_profile'), {
            'first_name': '', 'last_name': '', 'email': 'alice@example.com', 'time_zone': 'Mars/Olympus',
        })

        assert response.status_code == 200
        assert response.context['form'].errors['time_zone']

    def test_email_already_taken(self):
        make_user('bob')

        response = self.client.post(reverse('edit_profile'), {
            'first_name': '', 'last_name': '', 'email': 'bob@example.com', 'time_zone': 'UTC',
        })

        assert response.context['form'].errors['email']
        assert User.objects.get(pk=self.user.pk).email == 'alice@example.com'

    def test_requires_login(self):
        self.client.logout()
        assert self.client.get(reverse('edit_profile')).status_code == 302


class TestAddFriendView(TestCase):
    def setUp(self):
        self.user = make_user('alice')
        make_user('bob')
        self.client.force_login(self.user)

    def test_adds_friend(self):
        response = self.client.post(reverse('add_friend'), {'userName': 'bob'})

        assert response.json() == {'success': True, 'responseText': 'Friend added'}
        assert self.user.friends.filter(username='bob').exists()

    def test_no_user_given(self):
        response = self.client.post(reverse('add_friend'), {})

        assert response.json() == {'success': False, 'responseText': 'No user provided'}

    def test_unknown_user(self):
        response = self.client.post(reverse('add_friend'), {'userName': 'nobody'})

        assert response.json() == {'success': False, 'responseText': 'No user called nobody was found'}


class TestUsersJsonView(TestCase):
    def test_returns_matching_users(self):
        make_user('dragon')
        make_user('elf')

        response = self.client.get(reverse('users_json'), {'term': 'dra'})

        assert response.json() == [{'username': 'dragon', 'avatar': None}]


class TestImageUploadView(TestCase):
    def setUp(self):
        self.user = make_user('alice')
        self.client.force_login(self.user)

    def test_no_file_selected(self):
        response = self.client.post(reverse('image_upload'), follow=True)

        self.assertRedirects(response, reverse('edit_profile'))
        self.assertContains(response, 'No image was selected. Please select an image.')

    def test_invalid_file_error_is_flashed(self):
        upload = SimpleUploadedFile('notes.png', b'not a picture', content_type='image/png')

        response = self.client.post(reverse('image_upload'), {'file': upload}, follow=True)

        self.assertContains(response, 'The selected file is not a valid image.')

    def test_upload_error_is_shown_as_a_form_error(self):
        response = self.client.post(reverse('image_upload'), follow=True)

        assert response.context['upload_errors'] == ["No image was selected. Please select an image."]
        self.assertContains(response, '<ul class="errorlist nonfield">')
        self.assertNotContains(response, 'class="flash-messages"')

    def test_upload_error_is_only_shown_once(self):
        self.client.post(reverse('image_upload'))
        self.client.get(reverse('edit_profile'))

        response = self.client.get(reverse('edit_profile'))

        assert response.context['upload_errors'] == []
