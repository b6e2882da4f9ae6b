# gamesessions/routing.py

# Import path from django.urls because it's used to define WebSocket URL patterns.
from django.urls import path
# Import consumers from . because 'websocket_urlpatterns' needs the SessionFeedConsumer.
from . import consumers

"""
This list defines the WebSocket addresses the gamesessions app
listens to: one live feed per session, identified by its UUID.
"""
websocket_urlpatterns = [
    path("ws/session/<uuid:session_id>/", consumers.SessionFeedConsumer.as_asgi()),
]
