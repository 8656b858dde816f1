# core/queries.py
import logging

import bcrypt
from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from core import core_models
from core.core_models import Role
from core.db_utils import (
    atomic_write,
    get_post_row,
    get_user_row,
    posts_newest_first,
    storage_guard,
    user_exists,
)
from core.exceptions import NotFound, PersistenceError

logger = logging.getLogger(__name__)


# -------------------------
# Posts
# -------------------------
def create_post(owner_user_id: str, title: str, details: str) -> core_models.Post:
    """
    Persist a new Post owned by ``owner_user_id``.
    Title and details are expected to be normalized already; nothing is trimmed here.
    Not retried: a failed create surfaces as PersistenceError to the caller.
    """
    with storage_guard("create post"):
        if not user_exists(owner_user_id):
            logger.error("Refusing to create post: owner %s does not exist", owner_user_id)
            raise PersistenceError(f"Owner '{owner_user_id}' does not exist")

    with atomic_write("create post"):
        post = core_models.Post.objects.create(
            owner_id=owner_user_id,
            title=title,
            details=details,
            created_at=timezone.now(),
        )
    logger.info("Post %s created by %s", post.post_id, owner_user_id)
    return post


def list_posts() -> list:
    """Snapshot of every post, newest first, owner joined."""
    with storage_guard("list posts"):
        return list(posts_newest_first())


def list_posts_by_owner(user_id: str) -> list:
    with storage_guard("list posts by owner"):
        return list(posts_newest_first().filter(owner_id=user_id))


def get_post_by_id(post_id: str) -> core_models.Post:
    with storage_guard("get post"):
        post = get_post_row(post_id)
    if post is None:
        raise NotFound("Post", post_id)
    return post


# -------------------------
# Users
# -------------------------
def get_user_by_id(user_id: str) -> core_models.User:
    with storage_guard("get user"):
        user = get_user_row(user_id)
    if user is None:
        raise NotFound("User", user_id)
    return user


def get_user_by_email(email: str):
    """Return the user with this email (case-insensitive) or None."""
    if not email:
        return None
    with storage_guard("get user by email"):
        return core_models.User.objects.filter(email__iexact=email.strip()).first()


def hash_password(password: str) -> str:
    rounds = getattr(settings, "PASSWORD_ROUNDS", 12)
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def check_password(user: core_models.User, password: str) -> bool:
    if not user.password or not password:
        return False
    return bcrypt.checkpw(password.encode(), user.password.encode())


def add_user(email: str, password: str = None, name: str = None, role: str = Role.READER,
             image: str = None) -> core_models.User:
    """
    Create a user record. Administrative path only (management command).
    Raises ValueError on an unknown role or a duplicate email.
    """
    if role not in Role.values:
        raise ValueError(f"Unknown role '{role}'. Expected one of: {', '.join(Role.values)}")
    email = email.strip().lower() if email else None
    if email and get_user_by_email(email):
        raise ValueError(f"A user with email '{email}' already exists.")

    with atomic_write("add user"):
        user = core_models.User.objects.create(
            email=email,
            name=name or None,
            role=role,
            image=image or None,
            password=hash_password(password) if password else None,
        )
    logger.info("User %s added with role %s", user.id, role)
    return user


def set_user_role(user_id: str, role: str) -> core_models.User:
    """Out-of-band role change. Never called from a request path."""
    if role not in Role.values:
        raise ValueError(f"Unknown role '{role}'. Expected one of: {', '.join(Role.values)}")
    user = get_user_by_id(user_id)
    previous = user.role
    with atomic_write("set user role"):
        core_models.User.objects.filter(pk=user.pk).update(role=role)
    user.role = role
    logger.info("User %s role changed from %s to %s", user.id, previous, role)
    return user


def count_users_by_role() -> dict:
    """Return {role: count} for every enumerated role, zeros included."""
    with storage_guard("count users by role"):
        rows = core_models.User.objects.values("role").annotate(n=Count("id"))
        counts = {row["role"]: row["n"] for row in rows}
    return {role: counts.get(role, 0) for role in Role.values}
