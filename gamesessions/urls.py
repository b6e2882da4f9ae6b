# gamesessions/urls.py

# Import path from django.urls because it's needed to define each URL route.
from django.urls import path
# Import views from .views because all the functions that handle session pages are here.
from .views import (
    session_list_view, create_session_view, edit_session_view, session_detail_view,
    add_comment_view, join_session_view, leave_session_view, cancel_session_view,
)

"""
This file is the "address book" for the 'gamesessions' app. It maps
the web addresses for browsing, creating, editing and taking part
in gaming sessions to the view functions that handle them. Sessions
are identified by their UUID.
"""
urlpatterns = [
    # List of all public sessions
    path('', session_list_view, name='session_list'),
    # Page to create a new session
    path('Create', create_session_view, name='create_session'),
    # Page showing details and the message feed of one session
    path('<uuid:pk>', session_detail_view, name='session_detail'),
    # Page to edit a session (creator only)
    path('<uuid:pk>/Edit', edit_session_view, name='edit_session'),
    # Actions on a session
    path('<uuid:pk>/Comment', add_comment_view, name='add_session_comment'),
    path('<uuid:pk>/Join', join_session_view, name='join_session'),
    path('<uuid:pk>/Leave', leave_session_view, name='leave_session'),
    path('<uuid:pk>/Cancel', cancel_session_view, name='cancel_session'),
]
