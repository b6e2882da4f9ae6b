# accounts/models.py

import logging
import os
from io import BytesIO

from django.contrib.auth.models import AbstractUser
from django.core.files.base import ContentFile
from django.db import models
from PIL import Image

from core.utils import DEFAULT_TIME_ZONE
from .managers import CustomUserManager

logger = logging.getLogger(__name__)

# Avatars bigger than this get shrunk before they are stored
AVATAR_MAX_SIZE = (256, 256)

"""
This class is the account for a gamer. On top of Django's normal
user fields it keeps the time zone the user wants to see session
times in, and the list of people they added as friends. Friends are
one-way: adding someone does not add you to their list.
"""
class User(AbstractUser):
    email = models.EmailField(unique=True)
    time_zone = models.CharField(max_length=64, default=DEFAULT_TIME_ZONE)
    friends = models.ManyToManyField('self', symmetrical=False, blank=True, related_name='friend_of')

    REQUIRED_FIELDS = ['email']

    objects = CustomUserManager()

    def __str__(self):
        return self.username


"""
This class is the public profile page data for a user: a short bio
and an avatar picture. A profile is created automatically for every
new user (see signals.py).
"""
class Profile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE)
    bio = models.TextField(blank=True)
    avatar = models.ImageField(upload_to='avatars/', blank=True, null=True)

    @property
    def avatar_url(self):
        if self.avatar:
            return self.avatar.url
        return None

    def __str__(self):
        return f'{self.user.username} Profile'

    # Shrinks big avatars to a square thumbnail before saving
    def save(self, *args, **kwargs):
        if self.avatar and not getattr(self.avatar, '_committed', True):
            if hasattr(self.avatar, 'seek'):
                self.avatar.seek(0)

            try:
                img = Image.open(self.avatar)
                if img.mode != 'RGB':
                    img = img.convert('RGB')

                if img.height > AVATAR_MAX_SIZE[1] or img.width > AVATAR_MAX_SIZE[0]:
                    img.thumbnail(AVATAR_MAX_SIZE, Image.Resampling.LANCZOS)
                    output = BytesIO()
                    img.save(output, format='JPEG', quality=80)
                    output.seek(0)

                    new_name = os.path.splitext(os.path.basename(self.avatar.name))[0] + '.jpg'
                    self.avatar = ContentFile(output.read(), name=new_name)
                elif hasattr(self.avatar, 'seek'):
                    self.avatar.seek(0)

            except (OSError, ValueError):
                # Keep the original upload if Pillow can't resize it
                logger.warning("Unable to optimize avatar for %s", self.user_id, exc_info=True)
                if hasattr(self.avatar, 'seek'):
                    self.avatar.seek(0)

        super().save(*args, **kwargs)
