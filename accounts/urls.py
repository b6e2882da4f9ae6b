# accounts/urls.py

from django.urls import path
from .views import profile_view, edit_profile_view, add_friend_view, users_json_view, image_upload_view

# Fixed paths come before '<username>' so they aren't read as usernames
urlpatterns = [
    path('Edit', edit_profile_view, name='edit_profile'),
    path('AddFriend', add_friend_view, name='add_friend'),
    path('GetUsersJson', users_json_view, name='users_json'),
    path('ImageUpload', image_upload_view, name='image_upload'),
    path('<str:username>', profile_view, name='profile'),
]
