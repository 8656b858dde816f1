# core/db_utils.py
import logging
from contextlib import contextmanager

from django.db import DatabaseError, transaction

from core import core_models
from core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


# -----------------------------
# Low-level helpers
# -----------------------------
@contextmanager
def storage_guard(operation: str):
    """
    Run a unit of work and surface storage failures as PersistenceError.
    Example:
        with storage_guard("create post"):
            Post.objects.create(...)
    """
    try:
        yield
    except DatabaseError as exc:
        logger.error("Storage failure during %s: %s", operation, exc)
        raise PersistenceError(f"Storage failure during {operation}") from exc


@contextmanager
def atomic_write(operation: str):
    """Single-statement write wrapped in its own transaction."""
    with storage_guard(operation):
        with transaction.atomic():
            yield


# -----------------------------
# ORM wrappers (for convenience)
# -----------------------------
def user_exists(user_id: str) -> bool:
    return core_models.User.objects.filter(pk=user_id).exists()


def get_user_row(user_id: str):
    """Get user object or None by id."""
    return core_models.User.objects.filter(pk=user_id).first()


def get_post_row(post_id: str):
    """Get post object (owner joined) or None by id."""
    return core_models.Post.objects.select_related("owner").filter(pk=post_id).first()


def posts_newest_first():
    """All posts with their owner joined, newest first."""
    return core_models.Post.objects.select_related("owner").order_by("-created_at")
