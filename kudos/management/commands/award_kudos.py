# kudos/management/commands/award_kudos.py

# Import BaseCommand and CommandError because this is a custom management command.
from django.core.management.base import BaseCommand, CommandError
# Import get_user_model from django.contrib.auth because we look the gamer up by username.
from django.contrib.auth import get_user_model
# Import add_kudos_points from kudos.services because it updates both the balance and the history.
from kudos.services import add_kudos_points

User = get_user_model()

"""
This class defines a custom command that can be run from the
server's command line (using 'python manage.py award_kudos <username> <points>').
It lets an administrator hand out (or take away, with a negative
number) kudos points, going through the same code path as the
rest of the site so the history record is written too.
"""
class Command(BaseCommand):
    help = 'Adds kudos points to a user and records the change in their history.'

    def add_arguments(self, parser):
        parser.add_argument('username')
        parser.add_argument('points', type=int)

    def handle(self, *args, **options):
        try:
            user = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"No user named '{options['username']}'.")

        result = add_kudos_points(user, options['points'])
        if not result:
            raise CommandError(result.error)

        self.stdout.write(self.style.SUCCESS(
            f"{user.username} now has {result.value.points} kudos."
        ))
