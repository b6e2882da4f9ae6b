# kudos/views.py

# Import render from django.shortcuts because the leaderboard is a normal page.
from django.shortcuts import render
# Import kudos_leaderboard from .services because it builds the list of top gamers.
from .services import kudos_leaderboard

"""
This function shows the public kudos leaderboard: the gamers with
the most reputation points, highest first.
"""
def leaderboard_view(request):
    leaders = kudos_leaderboard()
    return render(request, 'kudos/leaderboard.html', {'leaders': leaders})
