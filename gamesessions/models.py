# gamesessions/models.py

# Import uuid because sessions are identified by a UUID in their URLs.
import uuid
# Import models from django.db because this file defines database models.
from django.db import models
# Import settings from django.conf because sessions and messages link to the User model.
from django.conf import settings
# Import timezone from django.utils because created dates default to the current (UTC) time.
from django.utils import timezone

# Import the sentinel used for "no limit on gamers" from .constants.
from .constants import UNLIMITED_GAMERS

"""
These three classes are the lookup tables a session is described
with: which platform it's played on (PC, PlayStation...), what kind
of session it is (Co-op, Competitive...) and how long it's expected
to last. They are filled in by the 'seed_lookups' command or the
admin panel and only read by the rest of the site.
"""
class Platform(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class SessionType(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class SessionDuration(models.Model):
    minutes = models.PositiveIntegerField(unique=True)
    label = models.CharField(max_length=50)

    class Meta:
        ordering = ['minutes']

    def __str__(self):
        return self.label

"""
This class represents a scheduled multiplayer gaming session. It
stores who created it, when it is scheduled for (always saved in
UTC), what platform/type/duration it is, how many gamers it needs
and who has signed up. Sessions are never deleted by the site; a
cancelled session just gets the 'Cancelled' status.
"""
class Session(models.Model):

    class Status(models.TextChoices):
        OPEN = 'Open', 'Open'
        FULL = 'Full', 'Full'
        CANCELLED = 'Cancelled', 'Cancelled'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    creator = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='created_sessions')
    scheduled_date = models.DateTimeField()
    created_date = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPEN)
    platform = models.ForeignKey(Platform, on_delete=models.PROTECT, related_name='sessions')
    session_type = models.ForeignKey(SessionType, on_delete=models.PROTECT, related_name='sessions')
    duration = models.ForeignKey(SessionDuration, on_delete=models.PROTECT, related_name='sessions')
    information = models.TextField(blank=True)
    # How many gamers are wanted in total, or UNLIMITED_GAMERS
    gamers_required = models.IntegerField()
    signed_gamers = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name='joined_sessions', blank=True)

    def __str__(self):
        return f"{self.session_type} on {self.platform} at {self.scheduled_date:%Y-%m-%d %H:%M}"

    @property
    def is_unlimited(self):
        return self.gamers_required == UNLIMITED_GAMERS

    @property
    def gamers_required_display(self):
        if self.is_unlimited:
            return 'Unlimited'
        return str(self.gamers_required)

"""
This class holds the per-session options: whether the session
shows up in the public session list, and whether the creator wants
to approve people who join. Every session has exactly one.
"""
class SessionSettings(models.Model):
    session = models.OneToOneField(Session, on_delete=models.CASCADE, related_name='settings')
    is_public = models.BooleanField(default=True)
    approve_joinees = models.BooleanField(default=False)

    class Meta:
        verbose_name_plural = 'session settings'

    def __str__(self):
        return f"Settings for {self.session_id}"

"""
This class is one entry in a session's message feed. 'system'
messages are written by the site itself (session created, someone
joined...) and 'comment' messages are written by gamers. The feed
is always read oldest first.
"""
class SessionMessage(models.Model):

    class Kind(models.TextChoices):
        SYSTEM = 'system', 'System'
        COMMENT = 'comment', 'Comment'

    session = models.ForeignKey(Session, on_delete=models.CASCADE, related_name='messages')
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    body = models.TextField()
    kind = models.CharField(max_length=10, choices=Kind.choices, default=Kind.COMMENT)
    created_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_date', 'id']

    def __str__(self):
        return f"{self.get_kind_display()} message in session {self.session_id}"
