# gamesessions/utils.py

from datetime import datetime, time, timedelta

from django.utils import timezone

from core.utils import get_user_timezone, to_time_zone
from .constants import UNLIMITED_GAMERS, TIME_SLOT_MINUTES, DEFAULT_SESSION_LEAD_HOURS


def get_time_slots():
    """Returns 24 hours worth of time slots, one every 15 minutes ('0:00' ... '23:45')."""
    times = []
    for hour in range(24):
        for minute in range(0, 60, TIME_SLOT_MINUTES):
            times.append(f"{hour}:{minute:02d}")
    return times


def parse_time_slot(value):
    # '9:15' -> time(9, 15)
    hour, minute = value.split(':')
    return time(int(hour), int(minute))


def format_time_slot(value):
    return f"{value.hour}:{value.minute:02d}"


def get_gamers_required_options():
    """
    Returns the choices for how many gamers a session needs: every
    number from 2 to 24, then 32 and 64, then the 'Unlimited' option.
    """
    options = [(i, i) for i in range(2, 25)]
    options.append((32, 32))
    options.append((64, 64))
    options.append((UNLIMITED_GAMERS, 'Unlimited'))
    return options


def combine_date_and_time(day, time_of_day):
    """
    Builds one datetime from the separate date and time inputs of the
    session forms: the calendar day of 'day' plus the time of day of
    'time_of_day'. Either argument may be a full datetime.
    """
    if isinstance(day, datetime):
        day = day.date()
    if isinstance(time_of_day, datetime):
        time_of_day = time_of_day.time()
    return datetime.combine(day, time_of_day.replace(tzinfo=None))


def round_up_to_quarter_hour(value):
    # Times already on a boundary are left alone
    step = timedelta(minutes=TIME_SLOT_MINUTES)
    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    elapsed = value - midnight
    remainder = elapsed % step
    if remainder:
        value = value + (step - remainder)
    return value


def get_default_session_time(user):
    """
    The time suggested on the create form: one hour from now, in the
    user's own time zone, rounded up to the next 15 minute slot.
    """
    later = timezone.now() + timedelta(hours=DEFAULT_SESSION_LEAD_HOURS)
    return round_up_to_quarter_hour(to_time_zone(later, get_user_timezone(user)))
