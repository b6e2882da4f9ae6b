# config/wsgi.py

# Import os because it's needed to set the 'DJANGO_SETTINGS_MODULE' environment variable.
import os
# Import get_wsgi_application from django.core.wsgi because 'application' needs it.
from django.core.wsgi import get_wsgi_application

"""
Entry-point for plain WSGI servers. Pages, forms and the JSON
endpoints all work through it, and views can still broadcast to the
session feeds, but the WebSocket feeds themselves are only served by
the ASGI application in asgi.py (run with Daphne).
"""
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
