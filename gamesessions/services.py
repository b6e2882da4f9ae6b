# gamesessions/services.py

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List

from django.db import transaction
from django.utils import timezone

from core.results import Result, NOT_FOUND, FORBIDDEN, VALIDATION, UNEXPECTED
from core.utils import get_user_timezone, to_utc, to_time_zone, is_unambiguous_local_time
from .constants import SESSION_JOINED_MESSAGE, SESSION_LEFT_MESSAGE, SESSION_CANCELLED_MESSAGE
from .feed import add_session_created_message, add_comment_to_session, add_system_message
from .forms import CreateSessionForm, EditSessionForm
from .models import Session, SessionSettings
from .utils import combine_date_and_time, format_time_slot, get_default_session_time

logger = logging.getLogger(__name__)

# Related rows almost every session page needs
SESSION_RELATIONS = ('creator', 'platform', 'session_type', 'duration', 'settings')

UNCLEAR_TIME_ERROR = (
    "That time is skipped or repeated by a daylight saving change in your time zone. "
    "Please pick another time."
)


@dataclass
class SessionDetails:
    """Everything the session page shows, with dates in the viewer's time zone."""
    id: Any
    creator: Any
    scheduled_date: datetime
    created_date: datetime
    status: str
    platform: Any
    session_type: Any
    duration: Any
    information: str
    gamers_required: int
    gamers_required_display: str
    is_public: bool
    approve_joinees: bool
    signed_gamers: List[Any] = field(default_factory=list)
    messages: List[Any] = field(default_factory=list)

    @property
    def is_full(self):
        return self.status == Session.Status.FULL

    @property
    def is_cancelled(self):
        return self.status == Session.Status.CANCELLED


# --- Field mapping (form data -> models) ---

def apply_session_fields(session, data, tz):
    """
    Copies the top-level session fields from cleaned form data onto
    'session'. The date and time the user picked are joined and read
    as being in 'tz', then stored as UTC.
    """
    session.platform = data['platform']
    session.session_type = data['session_type']
    session.duration = data['duration']
    session.gamers_required = data['gamers_required']
    session.information = data.get('information', '')

    scheduled = combine_date_and_time(data['scheduled_date'], data['scheduled_time'])
    session.scheduled_date = to_utc(scheduled, tz)
    session.created_date = to_utc(session.created_date)


def has_clear_scheduled_time(data, tz):
    # False for a date and time that a DST change skips or repeats in 'tz'
    scheduled = combine_date_and_time(data['scheduled_date'], data['scheduled_time'])
    return is_unambiguous_local_time(scheduled, tz)


def refresh_session_status(session):
    """
    Works out whether a session is Open or Full from how many gamers
    have signed up against how many it needs. Cancelled sessions keep
    their status; only 'cancel_session' sets it.
    """
    if session.status == Session.Status.CANCELLED:
        return
    if not session.is_unlimited and session.signed_gamers.count() >= session.gamers_required:
        session.status = Session.Status.FULL
    else:
        session.status = Session.Status.OPEN


def apply_settings_fields(settings, data):
    settings.is_public = data.get('is_public', False)
    settings.approve_joinees = data.get('approve_joinees', False)


def convert_session_times_to_time_zone(session, tz):
    # Only for display: a converted session must never be saved
    session.created_date = to_time_zone(session.created_date, tz)
    session.scheduled_date = to_time_zone(session.scheduled_date, tz)
    for message in session.messages.all():
        message.created_date = to_time_zone(message.created_date, tz)


# --- Reads ---

def get_all(user):
    """
    Returns every public session, latest scheduled first, with its
    dates (and its messages' dates) converted to the user's time zone.
    """
    sessions = list(
        Session.objects.filter(settings__is_public=True)
        .select_related(*SESSION_RELATIONS)
        .prefetch_related('messages')
        .order_by('-scheduled_date')
    )

    tz = get_user_timezone(user)
    for session in sessions:
        convert_session_times_to_time_zone(session, tz)

    return sessions


def get_all_queryable():
    return Session.objects.all()


def get_by_id(session_id):
    return Session.objects.select_related(*SESSION_RELATIONS).filter(pk=session_id).first()


async def get_by_id_async(session_id):
    return await Session.objects.select_related(*SESSION_RELATIONS).filter(pk=session_id).afirst()


# --- Writes ---

def create_session(user, data):
    """
    Creates a session from the cleaned data of a CreateSessionForm.
    The creator is signed up as the first gamer and a "created"
    message starts the feed. Returns a Result holding the new session.
    """
    tz = get_user_timezone(user)
    if not has_clear_scheduled_time(data, tz):
        return Result.err(VALIDATION, UNCLEAR_TIME_ERROR)

    try:
        with transaction.atomic():
            session = Session(creator=user, created_date=timezone.now())
            apply_session_fields(session, data, tz)
            session.save()

            settings = SessionSettings(session=session)
            apply_settings_fields(settings, data)
            settings.save()

            add_session_created_message(session, user)
            session.signed_gamers.add(user)

        return Result.ok(session)
    except Exception:
        logger.exception("Unable to create session")
        return Result.err(UNEXPECTED, "Unable to create session")


def edit_session(user, data):
    """
    Saves the cleaned data of an EditSessionForm over the stored
    session. Whatever was saved last wins; edits are not merged.
    """
    try:
        session = get_by_id(data['session_id'])
        if session is None:
            return Result.err(NOT_FOUND, "Session not found")

        tz = get_user_timezone(user)
        if not has_clear_scheduled_time(data, tz):
            return Result.err(VALIDATION, UNCLEAR_TIME_ERROR)

        with transaction.atomic():
            apply_session_fields(session, data, tz)
            # The gamer limit may have moved past (or below) the sign-ups
            refresh_session_status(session)
            session.save()

            settings, _ = SessionSettings.objects.get_or_create(session=session)
            apply_settings_fields(settings, data)
            settings.save()

        # TODO: tell the signed gamers about the changes once there is a notification channel for it
        return Result.ok(session)
    except Exception:
        logger.exception("Unable to edit session %s", data.get('session_id'))
        return Result.err(UNEXPECTED, "Unable to save the session")


def add_session_comment(user, comment, session_id):
    try:
        session = get_by_id(session_id)
        if session is None:
            return Result.err(NOT_FOUND, "Session not found")

        message = add_comment_to_session(session, user, comment)
        return Result.ok(message)
    except Exception:
        logger.exception("Unable to add a comment to sessionId : %s", session_id)
        return Result.err(UNEXPECTED, "Unable to add your comment")


def join_session(user, session_id):
    """
    Signs the user up to a session. The session becomes 'Full' once
    the number of signed gamers reaches the number it asked for.
    """
    try:
        with transaction.atomic():
            session = Session.objects.select_for_update().filter(pk=session_id).first()
            if session is None:
                return Result.err(NOT_FOUND, "Session not found")
            if session.status == Session.Status.CANCELLED:
                return Result.err(VALIDATION, "This session has been cancelled")
            if session.signed_gamers.filter(pk=user.pk).exists():
                return Result.err(VALIDATION, "You have already joined this session")
            if session.status == Session.Status.FULL:
                return Result.err(VALIDATION, "This session is full")

            session.signed_gamers.add(user)
            message = add_system_message(session, SESSION_JOINED_MESSAGE.format(username=user.username), author=user)

            refresh_session_status(session)
            session.save(update_fields=['status'])

        return Result.ok(message)
    except Exception:
        logger.exception("Unable to add user %s to session %s", user.pk, session_id)
        return Result.err(UNEXPECTED, "Unable to join the session")


def leave_session(user, session_id):
    try:
        with transaction.atomic():
            session = Session.objects.select_for_update().filter(pk=session_id).first()
            if session is None:
                return Result.err(NOT_FOUND, "Session not found")
            if not session.signed_gamers.filter(pk=user.pk).exists():
                return Result.err(VALIDATION, "You are not part of this session")

            session.signed_gamers.remove(user)
            message = add_system_message(session, SESSION_LEFT_MESSAGE.format(username=user.username), author=user)

            # A spot may have opened up
            refresh_session_status(session)
            session.save(update_fields=['status'])

        return Result.ok(message)
    except Exception:
        logger.exception("Unable to remove user %s from session %s", user.pk, session_id)
        return Result.err(UNEXPECTED, "Unable to leave the session")


def cancel_session(user, session_id):
    try:
        session = get_by_id(session_id)
        if session is None:
            return Result.err(NOT_FOUND, "Session not found")
        if session.creator_id != user.pk:
            return Result.err(FORBIDDEN, "Only the creator can cancel this session")

        with transaction.atomic():
            session.status = Session.Status.CANCELLED
            session.save(update_fields=['status'])
            message = add_system_message(session, SESSION_CANCELLED_MESSAGE.format(username=user.username), author=user)

        return Result.ok(message)
    except Exception:
        logger.exception("Unable to cancel session %s", session_id)
        return Result.err(UNEXPECTED, "Unable to cancel the session")


# --- View model preparation ---

def prepare_create_session_vm(user, form=None):
    """
    Returns the create form ready to be shown. A fresh form gets the
    suggested date and time; a submitted form that failed validation
    just gets its select lists reloaded.
    """
    if form is None:
        default_time = get_default_session_time(user)
        form = CreateSessionForm(initial={
            'scheduled_date': default_time.date(),
            'scheduled_time': format_time_slot(default_time),
            'is_public': True,
        })
    else:
        form.bind_options()
    return form


def prepare_edit_session_vm(form):
    form.bind_options()
    return form


def prepare_view_session_vm(user, session_id):
    try:
        session = (
            Session.objects.select_related(*SESSION_RELATIONS)
            .prefetch_related('messages__author', 'signed_gamers')
            .filter(pk=session_id)
            .first()
        )
        if session is None:
            return None

        tz = get_user_timezone(user)
        convert_session_times_to_time_zone(session, tz)

        return SessionDetails(
            id=session.id,
            creator=session.creator,
            scheduled_date=session.scheduled_date,
            created_date=session.created_date,
            status=session.status,
            platform=session.platform,
            session_type=session.session_type,
            duration=session.duration,
            information=session.information,
            gamers_required=session.gamers_required,
            gamers_required_display=session.gamers_required_display,
            is_public=session.settings.is_public,
            approve_joinees=session.settings.approve_joinees,
            signed_gamers=list(session.signed_gamers.all()),
            messages=list(session.messages.all()),
        )
    except Exception:
        logger.exception("Unable to prepare session %s for viewing", session_id)
        raise


def edit_session_vm(user, session_id):
    """
    Loads a session into an EditSessionForm, with its scheduled date
    and time shown in the user's time zone. Returns None if the
    session doesn't exist.
    """
    try:
        session = get_by_id(session_id)
        if session is None:
            return None

        scheduled = to_time_zone(session.scheduled_date, get_user_timezone(user))
        return EditSessionForm(initial={
            'session_id': session.id,
            'scheduled_date': scheduled.date(),
            'scheduled_time': format_time_slot(scheduled),
            'platform': session.platform_id,
            'session_type': session.session_type_id,
            'duration': session.duration_id,
            'gamers_required': session.gamers_required,
            'information': session.information,
            'is_public': session.settings.is_public,
            'approve_joinees': session.settings.approve_joinees,
        })
    except Exception:
        logger.exception("Unable to prepare session %s for editing", session_id)
        raise
