# gamesessions/lookups.py

# Import the lookup tables from .models because these functions list their rows.
from .models import Platform, SessionType, SessionDuration

"""
These functions provide the options for the select lists on the
create and edit session forms. They only read from the database.
"""

# Durations, shortest first
def get_durations():
    return SessionDuration.objects.order_by('minutes')


# Session types, alphabetical
def get_session_types():
    return SessionType.objects.order_by('name')


# Platforms, alphabetical
def get_platforms():
    return Platform.objects.order_by('name')
