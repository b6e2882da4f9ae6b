# gamesessions/management/commands/seed_lookups.py

# Import BaseCommand from django.core.management.base because custom management commands are based on it.
from django.core.management.base import BaseCommand
# Import transaction from django.db because the lookups are inserted all-or-nothing.
from django.db import transaction
# Import the lookup models because this command fills them in.
from gamesessions.models import Platform, SessionType, SessionDuration

DEFAULT_PLATFORMS = ['PC', 'PlayStation 5', 'PlayStation 4', 'Xbox Series X|S', 'Xbox One', 'Nintendo Switch', 'Mobile']

DEFAULT_SESSION_TYPES = [
    ('Casual', 'Relaxed play, all skill levels welcome.'),
    ('Competitive', 'Ranked or tournament play.'),
    ('Co-op', 'Working together through campaigns, raids or missions.'),
    ('Boosting', 'Helping each other unlock achievements or trophies.'),
    ('Clan Match', 'Organised matches between clans or teams.'),
]

DEFAULT_DURATIONS = [
    (30, '30 minutes'),
    (60, '1 hour'),
    (90, '1 hour 30 minutes'),
    (120, '2 hours'),
    (180, '3 hours'),
    (240, '4 hours'),
    (360, '6 hours+'),
]

"""
This class defines a custom command that can be run from the
server's command line (using 'python manage.py seed_lookups').
It fills in the platform, session type and duration tables that
the create session form needs. Rows that already exist are left
alone, so it is safe to run more than once.
"""
class Command(BaseCommand):
    help = 'Creates the default platforms, session types and durations.'

    def handle(self, *args, **kwargs):
        created = 0
        with transaction.atomic():
            for name in DEFAULT_PLATFORMS:
                _, was_created = Platform.objects.get_or_create(name=name)
                created += was_created

            for name, description in DEFAULT_SESSION_TYPES:
                _, was_created = SessionType.objects.get_or_create(name=name, defaults={'description': description})
                created += was_created

            for minutes, label in DEFAULT_DURATIONS:
                _, was_created = SessionDuration.objects.get_or_create(minutes=minutes, defaults={'label': label})
                created += was_created

        if created:
            self.stdout.write(self.style.SUCCESS(f'Successfully created {created} lookup row(s).'))
        else:
            self.stdout.write(self.style.SUCCESS('All lookups already exist.'))
