from django.test import TestCase
from django.urls import reverse

from core.tests.helpers import make_user
from kudos.services import add_kudos_points


class TestLeaderboardView(TestCase):
    def test_lists_leaders(self):
        add_kudos_points(make_user('alice'), 12)
        add_kudos_points(make_user('bob'), 3)

        response = self.client.get(reverse('kudos_leaderboard'))

        assert response.status_code == 200
        assert [k.user.username for k in response.context['leaders']] == ['alice', 'bob']
        self.assertContains(response, 'alice')

    def test_empty_leaderboard(self):
        response = self.client.get(reverse('kudos_leaderboard'))

        self.assertContains(response, 'Nobody has any kudos yet.')
