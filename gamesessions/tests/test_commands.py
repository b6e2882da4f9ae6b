from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from gamesessions.management.commands.seed_lookups import DEFAULT_PLATFORMS, DEFAULT_SESSION_TYPES, DEFAULT_DURATIONS
from gamesessions.models import Platform, SessionType, SessionDuration


class TestSeedLookupsCommand(TestCase):
    def test_creates_lookups(self):
        out = StringIO()

        call_command('seed_lookups', stdout=out)

        assert Platform.objects.count() == len(DEFAULT_PLATFORMS)
        assert SessionType.objects.count() == len(DEFAULT_SESSION_TYPES)
        assert SessionDuration.objects.count() == len(DEFAULT_DURATIONS)
        assert 'Successfully created' in out.getvalue()

    def test_running_twice_adds_nothing(self):
        call_command('seed_lookups', stdout=StringIO())
        out = StringIO()

        call_command('seed_lookups', stdout=out)

        assert Platform.objects.count() == len(DEFAULT_PLATFORMS)
        assert 'All lookups already exist.' in out.getvalue()
