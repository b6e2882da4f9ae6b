"""Shared builders for the test suites of every app."""

from datetime import datetime, timezone as dt_timezone
from io import BytesIO

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from gamesessions.models import Platform, SessionType, SessionDuration, Session, SessionSettings

User = get_user_model()


def make_user(username, time_zone='UTC', **extra):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='not-a-real-password-123',
        time_zone=time_zone,
        **extra,
    )


def make_lookups():
    platform = Platform.objects.create(name='PC')
    session_type = SessionType.objects.create(name='Co-op')
    duration = SessionDuration.objects.create(minutes=60, label='1 hour')
    return platform, session_type, duration


def make_session(creator, platform, session_type, duration, scheduled=None, is_public=True,
                 gamers_required=4, **extra):
    session = Session.objects.create(
        creator=creator,
        platform=platform,
        session_type=session_type,
        duration=duration,
        scheduled_date=scheduled or datetime(2024, 1, 5, 19, 30, tzinfo=dt_timezone.utc),
        gamers_required=gamers_required,
        **extra,
    )
    SessionSettings.objects.create(session=session, is_public=is_public)
    session.signed_gamers.add(creator)
    return session


def make_image_file(name='avatar.png', size=(600, 400), color='red'):
    buffer = BytesIO()
    Image.new('RGB', size, color).save(buffer, format='PNG')
    return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')
