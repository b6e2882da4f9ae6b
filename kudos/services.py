# kudos/services.py

import logging

from django.db import transaction
from django.db.models import F

from core.results import Result, UNEXPECTED
from .models import Kudos, KudosHistory

logger = logging.getLogger(__name__)

# How many gamers the leaderboard shows
LEADERBOARD_SIZE = 20


def add_kudos_points(user, value):
    """
    Adds 'value' points to the user's kudos balance and records the
    change in their history. The increment happens in the database
    ('points = points + value') so two requests adding points at the
    same time can't overwrite each other. If the caller already has
    'user.kudos' loaded, it is refreshed to the new total.
    """
    try:
        with transaction.atomic():
            kudos, _ = Kudos.objects.get_or_create(user=user)
            Kudos.objects.filter(pk=kudos.pk).update(points=F('points') + value)
            KudosHistory.objects.create(kudos=kudos, points=value)

        kudos.refresh_from_db(fields=['points'])
        # Keeps the in-memory relation in step with the stored total
        user.kudos = kudos
        return Result.ok(kudos)
    except Exception:
        logger.exception("Unable to add %s kudos to user %s", value, user.pk)
        return Result.err(UNEXPECTED, "Unable to add kudos to user")


def kudos_leaderboard():
    # Top gamers by points; ties are broken by username so the order is stable
    try:
        return list(
            Kudos.objects.select_related('user')
            .order_by('-points', 'user__username')[:LEADERBOARD_SIZE]
        )
    except Exception:
        logger.exception("Unable to get Kudos leaderboards")
        return []
