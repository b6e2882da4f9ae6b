# gamesessions/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
This class tells Django that an app named "gamesessions" exists.
This app handles scheduling, browsing and joining gaming sessions,
and each session's message feed.
"""
class GameSessionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'gamesessions'
    verbose_name = 'Gaming sessions'
