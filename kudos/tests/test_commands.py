from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from core.tests.helpers import make_user
from kudos.models import Kudos


class TestAwardKudosCommand(TestCase):
    def test_awards_points(self):
        user = make_user('gamer')
        out = StringIO()

        call_command('award_kudos', 'gamer', '25', stdout=out)

        assert Kudos.objects.get(user=user).points == 25
        assert 'gamer now has 25 kudos.' in out.getvalue()

    def test_unknown_user(self):
        with self.assertRaises(CommandError):
            call_command('award_kudos', 'nobody', '5', stdout=StringIO())
