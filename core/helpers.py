# core/helpers.py
from django.utils import timezone


# ---------------------------
# Display Helpers
# ---------------------------

_UNITS = (
    ("year", 60 * 60 * 24 * 30 * 12),
    ("month", 60 * 60 * 24 * 30),
    ("day", 60 * 60 * 24),
    ("hour", 60 * 60),
    ("minute", 60),
)


def format_relative_time(then, now=None) -> str:
    """
    Human-readable age of a timestamp: "2 days ago", "1 hour ago", "5 seconds ago".
    Months are 30 days and years are 12 months. Future timestamps read as "0 seconds ago".
    """
    now = now or timezone.now()
    seconds = max(int((now - then).total_seconds()), 0)
    for unit, size in _UNITS:
        count = seconds // size
        if count > 0:
            return f"{count} {unit}{'s' if count != 1 else ''} ago"
    return f"{seconds} second{'s' if seconds != 1 else ''} ago"


def format_role_label(role) -> str:
    """Capitalize each word of a role name for badges ("contributor" -> "Contributor")."""
    return " ".join(word.capitalize() for word in str(role or "").split())


def post_card(post, now=None) -> dict:
    """Flatten a Post (owner joined) into the fields the list and detail pages show."""
    owner = post.owner
    return {
        "post_id": post.post_id,
        "title": post.title,
        "details": post.details,
        "created_at": post.created_at,
        "age": format_relative_time(post.created_at, now=now),
        "owner_id": owner.id,
        "owner_name": owner.display_name,
        "owner_role": owner.role,
        "owner_role_label": format_role_label(owner.role),
    }
