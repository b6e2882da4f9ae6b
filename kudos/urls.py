# kudos/urls.py

# Import path from django.urls because it's needed to define URL routes.
from django.urls import path
# Import views from .views because we need to map URLs to these functions.
from .views import leaderboard_view

urlpatterns = [
    # Page listing the top gamers by kudos
    path('Leaderboard', leaderboard_view, name='kudos_leaderboard'),
]
