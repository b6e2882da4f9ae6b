# kudos/models.py

# Import models from django.db because this file defines database models.
from django.db import models
# Import settings from django.conf because 'Kudos' links to the User model.
from django.conf import settings
# Import timezone from django.utils because history records are stamped with the current time.
from django.utils import timezone

"""
This class is a gamer's reputation balance. Each user owns exactly
one, created when the account is made. 'points' is the running
total; every change to it is also written to 'history' so the total
can always be explained (it should equal the sum of the history).
"""
class Kudos(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='kudos')
    points = models.IntegerField(default=0)

    class Meta:
        verbose_name_plural = 'kudos'

    def __str__(self):
        return f'{self.user} ({self.points} kudos)'


"""
This class is one entry in a user's kudos history. It stores the
change that was made ('points' is the amount added, not the new
total) and when it happened. Entries are only ever added.
"""
class KudosHistory(models.Model):
    kudos = models.ForeignKey(Kudos, on_delete=models.CASCADE, related_name='history')
    points = models.IntegerField()
    created_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_date', 'id']
        verbose_name_plural = 'kudos history'

    def __str__(self):
        return f'{self.points:+d} for {self.kudos.user}'
