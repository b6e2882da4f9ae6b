# config/asgi.py

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter  # noqa: E402
from channels.auth import AuthMiddlewareStack  # noqa: E402
from gamesessions import routing as gamesessions_routing  # noqa: E402

"""
This file is the main entry-point for the server. It acts as
a traffic controller that splits incoming connections.
It sends all normal web page (HTTP) requests to Django, and
sends all real-time (WebSocket) requests to the 'channels'
routing system.
RT: WebSocket traffic goes to the live session message feeds.
"""
application = ProtocolTypeRouter({
    "http": django_asgi_app,
    "websocket": AuthMiddlewareStack(
        URLRouter(gamesessions_routing.websocket_urlpatterns)
    ),
})
