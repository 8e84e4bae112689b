"""
WSGI entry point for production (gunicorn).

It exposes the WSGI callable as a module-level variable named ``application``.
Static files are served from inside this process by WhiteNoise.
"""

import os

from src.config.env import env

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", env.settings_module)

application = get_wsgi_application()
