# accounts/session.py
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.db import DatabaseError
from django.utils import timezone

from core.core_models import User
from core.exceptions import AuthInfrastructureError

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"
SESSION_AUTH_KEY = "authenticated"


@dataclass(frozen=True)
class Identity:
    """Who is calling, as resolved for a single request."""
    user_id: str
    role: str
    expires_at: Optional[datetime] = None


def resolve_session(session) -> Optional[Identity]:
    """
    Resolve a Django session to an Identity, or None when there is no usable session.
    The role is read from the store on every call so out-of-band role changes apply
    to existing sessions.
    """
    if session is None or not session.get(SESSION_AUTH_KEY):
        return None
    user_id = session.get(SESSION_USER_KEY)
    if not user_id:
        return None

    expires_at = session.get_expiry_date()
    if expires_at <= timezone.now():
        return None

    try:
        row = User.objects.filter(pk=user_id).values("id", "role").first()
    except DatabaseError as exc:
        logger.error("Identity store unreachable while resolving session: %s", exc)
        raise AuthInfrastructureError("Identity store unreachable") from exc

    if row is None:
        logger.warning("Session references unknown user %s", user_id)
        return None
    return Identity(user_id=row["id"], role=row["role"], expires_at=expires_at)


def start_session(request, user: User) -> None:
    """Attach ``user`` to the request's session, rotating the session key."""
    request.session.cycle_key()
    request.session[SESSION_AUTH_KEY] = True
    request.session[SESSION_USER_KEY] = user.id
    logger.info("Session started for user %s", user.id)


def end_session(request) -> None:
    user_id = request.session.get(SESSION_USER_KEY)
    request.session.flush()
    if user_id:
        logger.info("Session ended for user %s", user_id)
