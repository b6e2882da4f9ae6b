# gamesessions/feed.py

from django.utils import timezone

from .constants import SESSION_CREATED_MESSAGE
from .models import SessionMessage

"""
Helpers that append entries to a session's message feed. They only
build and save the message row; callers decide when the session
itself gets saved and who gets told about the new message.
"""


def add_system_message(session, body, author=None):
    return SessionMessage.objects.create(
        session=session,
        author=author,
        body=body,
        kind=SessionMessage.Kind.SYSTEM,
        created_date=timezone.now(),
    )


def add_session_created_message(session, user):
    # First entry of every feed
    return add_system_message(session, SESSION_CREATED_MESSAGE.format(username=user.username), author=user)


def add_comment_to_session(session, user, comment):
    return SessionMessage.objects.create(
        session=session,
        author=user,
        body=comment,
        kind=SessionMessage.Kind.COMMENT,
        created_date=timezone.now(),
    )
