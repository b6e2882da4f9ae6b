# config/views.py

# Import redirect from django.shortcuts because 'home_view' needs it.
from django.shortcuts import redirect

"""
This function handles the main home page ('/') of the website.
The session list is the front page of the site, for logged-in
users and visitors alike, so it just sends everyone there.
"""
def home_view(request):
    return redirect('session_list')
