# core/models.py
# Models live in core_models; importing them here registers them with the app.
from core.core_models import Post, Role, User  # noqa: F401
