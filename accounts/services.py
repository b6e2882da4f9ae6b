# accounts/services.py

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from PIL import Image, UnidentifiedImageError

from core.results import Result, NOT_FOUND, VALIDATION, UNEXPECTED
from .forms import EditProfileForm
from .models import Profile

logger = logging.getLogger(__name__)

User = get_user_model()

# Maximum number of users returned by the autocomplete search
USER_SEARCH_LIMIT = 10


def _profile_context(profile_user):
    # Everything both profile pages show
    return {
        'profile_user': profile_user,
        'profile': profile_user.profile,
        'kudos_points': profile_user.kudos.points if hasattr(profile_user, 'kudos') else 0,
        'friends': list(profile_user.friends.select_related('profile').order_by('username')),
        'upcoming_sessions': list(
            profile_user.joined_sessions.filter(scheduled_date__gte=timezone.now())
            .select_related('platform', 'session_type')
            .order_by('scheduled_date')
        ),
    }


def _load_user(**lookup):
    return User.objects.select_related('profile', 'kudos').filter(**lookup).first()


def get_my_profile(user_id):
    user = _load_user(pk=user_id)
    if user is None:
        return None
    return _profile_context(user)


def get_user_profile(username):
    user = _load_user(username=username)
    if user is None:
        return None
    return _profile_context(user)


def get_edit_profile_model(user_id):
    user = _load_user(pk=user_id)
    if user is None:
        return None
    return EditProfileForm(instance=user, initial={'bio': user.profile.bio})


def edit_profile(user_id, data):
    """
    Saves the cleaned data of an EditProfileForm onto the user and
    their profile.
    """
    try:
        user = _load_user(pk=user_id)
        if user is None:
            return Result.err(NOT_FOUND, "User not found")

        with transaction.atomic():
            user.first_name = data['first_name']
            user.last_name = data['last_name']
            user.email = data['email']
            user.time_zone = data['time_zone']
            user.save(update_fields=['first_name', 'last_name', 'email', 'time_zone'])

            user.profile.bio = data.get('bio', '')
            user.profile.save(update_fields=['bio'])

        return Result.ok(user)
    except Exception:
        logger.exception("Unable to edit profile for user %s", user_id)
        return Result.err(UNEXPECTED, "Unable to save your profile. Please try again.")


def add_friend(user, username):
    try:
        friend = User.objects.filter(username=username).first()
        if friend is None:
            return Result.err(NOT_FOUND, f"No user called {username} was found")
        if friend.pk == user.pk:
            return Result.err(VALIDATION, "You can't add yourself as a friend")
        if user.friends.filter(pk=friend.pk).exists():
            return Result.err(VALIDATION, f"{friend.username} is already your friend")

        user.friends.add(friend)
        return Result.ok(friend)
    except Exception:
        logger.exception("Unable to add %s as a friend of user %s", username, user.pk)
        return Result.err(UNEXPECTED, "Unable to add friend")


def get_user_menu_information(user_id):
    # Small summary shown in the header of every page
    user = _load_user(pk=user_id)
    if user is None:
        return None
    return {
        'username': user.username,
        'avatar_url': user.profile.avatar_url,
        'kudos_points': user.kudos.points if hasattr(user, 'kudos') else 0,
        'friend_count': user.friends.count(),
        'upcoming_session_count': user.joined_sessions.filter(scheduled_date__gte=timezone.now()).count(),
    }


def get_users_json(term):
    """
    Autocomplete search: users whose username starts with 'term',
    as a list of {'username', 'avatar'} dictionaries.
    """
    term = (term or '').strip()
    if not term:
        return []

    users = (
        User.objects.filter(username__istartswith=term, is_active=True)
        .select_related('profile')
        .order_by('username')[:USER_SEARCH_LIMIT]
    )
    return [{'username': u.username, 'avatar': u.profile.avatar_url} for u in users]


def process_image_upload(file, user_id):
    """
    Stores an uploaded picture as the user's avatar. The file must be
    an image Pillow can read and no bigger than MAX_AVATAR_UPLOAD_BYTES.
    """
    if file.size > settings.MAX_AVATAR_UPLOAD_BYTES:
        limit_mb = settings.MAX_AVATAR_UPLOAD_BYTES // (1024 * 1024)
        return Result.err(VALIDATION, f"The image is too big. The maximum size is {limit_mb}MB.")

    try:
        Image.open(file).verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        return Result.err(VALIDATION, "The selected file is not a valid image.")
    finally:
        file.seek(0)

    try:
        profile, _ = Profile.objects.get_or_create(user_id=user_id)
        if profile.avatar:
            profile.avatar.delete(save=False)
        profile.avatar = file
        profile.save()
        return Result.ok(profile)
    except Exception:
        logger.exception("Unable to save avatar for user %s", user_id)
        return Result.err(UNEXPECTED, "Unable to upload your image. Please try again.")
