# blogsite/asgi.py
"""ASGI entry point, e.g. ``uvicorn blogsite.asgi:application``."""
import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blogsite.settings")

application = get_asgi_application()
