# accounts/managers.py

# Import UserManager from django.contrib.auth.models because 'CustomUserManager' is based on it.
from django.contrib.auth.models import UserManager

"""
This class provides the core logic for how user accounts are
created. Gamers log in and are linked to by their username (it shows
up in profile URLs), but every account must also have an email
address. It contains two main functions: one for creating a regular
user ('create_user') and one for creating an administrator
('create_superuser').
"""
class CustomUserManager(UserManager):

    def create_user(self, username, email=None, password=None, **extra_fields):
        # Creates and saves a User with the given username, email and password.
        if not username:
            raise ValueError('The Username must be set')
        if not email:
            raise ValueError('The Email must be set')
        return super().create_user(username, email=email, password=password, **extra_fields)

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        # Creates and saves a SuperUser with the given username, email and password.
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self.create_user(username, email, password, **extra_fields)
