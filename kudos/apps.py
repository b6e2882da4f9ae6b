# kudos/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
This class tells Django that an app named "kudos" exists.
This app handles reputation points: each gamer's balance, the
history of changes to it, and the leaderboard.
"""
class KudosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'kudos'
