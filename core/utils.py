# core/utils.py

# Import zoneinfo because users store their preferred time zone as an IANA name.
import zoneinfo
# Import timezone as dt_timezone from datetime because stored dates are always UTC.
from datetime import timezone as dt_timezone
# Import timezone from django.utils because it knows how to attach and convert time zones.
from django.utils import timezone

# Time zone used for anonymous visitors and users with a bad setting
DEFAULT_TIME_ZONE = 'UTC'

"""
This is a helper used whenever a date needs to be shown to someone.
It looks up the time zone saved on the user's account. Anonymous
visitors (and anyone with a time zone name we don't recognise) get UTC.
"""
def get_user_timezone(user):
    name = getattr(user, 'time_zone', None) or DEFAULT_TIME_ZONE
    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        return zoneinfo.ZoneInfo(DEFAULT_TIME_ZONE)


"""
Turns a date into UTC so it can be saved. A date without a time zone
is treated as being in 'tz' (the time the user typed in their own
time zone); a date that already has a time zone is just converted.
A naive time that a DST change skips or repeats in 'tz' is read with
the offset from before the change, so check it with
'is_unambiguous_local_time' first when that matters.
"""
def to_utc(value, tz=None):
    if timezone.is_naive(value):
        value = timezone.make_aware(value, tz or dt_timezone.utc)
    return value.astimezone(dt_timezone.utc)


# True when the naive wall-clock time happens exactly once in 'tz'
# (not skipped or repeated by a daylight saving change)
def is_unambiguous_local_time(value, tz):
    earlier = value.replace(tzinfo=tz, fold=0)
    later = value.replace(tzinfo=tz, fold=1)
    return earlier.utcoffset() == later.utcoffset()


# Converts a stored (UTC) date into the given time zone for display
def to_time_zone(value, tz):
    if value is None:
        return None
    return timezone.localtime(value, tz)


# Sorted list of all time zone names, used for the profile form dropdown
def get_time_zone_choices():
    return [(name, name) for name in sorted(zoneinfo.available_timezones())]
