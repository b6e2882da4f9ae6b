# gamesessions/constants.py

"""
This file holds simple, reusable values (constants) used in
several places in the 'gamesessions' app, so the wording of the
system messages and the special numbers only live in one place.
"""
# Stored in 'gamers_required' when a session has no limit on gamers.
UNLIMITED_GAMERS = -1

# Size of one slot in the time picker, in minutes.
TIME_SLOT_MINUTES = 15

# How far ahead the create form suggests scheduling a new session.
DEFAULT_SESSION_LEAD_HOURS = 1

# System messages written to a session's feed.
SESSION_CREATED_MESSAGE = '{username} created the session.'
SESSION_JOINED_MESSAGE = '{username} joined the session.'
SESSION_LEFT_MESSAGE = '{username} left the session.'
SESSION_CANCELLED_MESSAGE = '{username} cancelled the session.'

# Prefix of the Channels group that receives live updates for one session.
SESSION_FEED_GROUP_PREFIX = 'session_feed_'
