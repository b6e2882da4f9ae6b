# accounts/apps.py

# Import AppConfig from django.apps because every Django app needs a configuration class.
from django.apps import AppConfig

"""
Configuration for the "accounts" app: gamer accounts, their
profiles and friend lists. Loading it also connects the signal
in signals.py, so a new gamer always gets a profile and a kudos
balance the moment their account is saved.
"""
class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'
    verbose_name = 'Gamer accounts'

    def ready(self):
        # Connects 'set_up_new_gamer'
        import accounts.signals  # noqa: F401
