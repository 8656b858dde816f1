# users_ui/context_processors.py
import logging

from django.db import DatabaseError
from django.urls import reverse

from accounts.roles import Action, Decision, authorize
from accounts.session import resolve_session
from core.core_models import User
from core.exceptions import AuthInfrastructureError
from core.helpers import format_role_label

logger = logging.getLogger(__name__)


def current_identity(request):
    """Navigation bar: who is signed in and which role areas they can open."""
    try:
        identity = resolve_session(getattr(request, "session", None))
        name = None
        if identity is not None:
            name = User.objects.filter(pk=identity.user_id).values_list("name", flat=True).first()
    except (AuthInfrastructureError, DatabaseError):
        logger.warning("Navigation rendered without identity: identity store unreachable")
        return {"nav_user": None, "nav_links": []}

    if identity is None:
        return {"nav_user": None, "nav_links": []}

    nav_links = []
    if authorize(identity.role, Action.VIEW_CONTRIBUTOR_AREA) is Decision.ALLOW:
        nav_links.append({"name": "Contributor", "url": reverse("contributor:dashboard")})
    if authorize(identity.role, Action.CREATE_POST) is Decision.ALLOW:
        nav_links.append({"name": "New post", "url": reverse("contributor:create_post")})
    if authorize(identity.role, Action.VIEW_ADMIN_AREA) is Decision.ALLOW:
        nav_links.append({"name": "Admin", "url": reverse("admin_panel:dashboard")})
    return {
        "nav_user": {
            "id": identity.user_id,
            "name": name or f"User {identity.user_id}",
            "role": identity.role,
            "role_label": format_role_label(identity.role),
        },
        "nav_links": nav_links,
    }
