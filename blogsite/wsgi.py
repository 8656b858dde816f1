# blogsite/wsgi.py
"""WSGI entry point, e.g. ``gunicorn blogsite.wsgi``."""
import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blogsite.settings")

application = get_wsgi_application()
