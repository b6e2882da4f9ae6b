# accounts/signals.py

# Import post_save from django.db.models.signals because we need to listen for when a model is saved.
from django.db.models.signals import post_save
# Import receiver from django.dispatch because it's the decorator used to connect a function to a signal.
from django.dispatch import receiver
# Import User and Profile from .models because 'User' is the sender and 'Profile' is created for it.
from .models import User, Profile
# Import Kudos from kudos.models because every new gamer starts with an empty points balance.
from kudos.models import Kudos

"""
This function is a "signal receiver." It runs every time a 'User'
is saved and, the first time only, sets up everything a new gamer
needs: an empty 'Profile' for their bio and avatar, and a 'Kudos'
balance starting at zero points. Because of this the rest of the
code can rely on 'user.profile' and 'user.kudos' existing.
"""
@receiver(post_save, sender=User)
def set_up_new_gamer(sender, instance, created, raw=False, **kwargs):
    # Fixtures loaded with loaddata bring their own rows
    if not created or raw:
        return
    Profile.objects.get_or_create(user=instance)
    Kudos.objects.get_or_create(user=instance)
