# core/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
This class tells Django that an app named "core" exists.
This app holds project-wide helpers that don't belong to just one
feature: the service result type and the time zone conversions
used by sessions, profiles and kudos.
"""
class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
