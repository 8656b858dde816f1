# users_ui/base_views.py
import logging
from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.http import Http404, HttpResponse
from django.shortcuts import render
from django.urls import reverse

from accounts.roles import require
from accounts.session import resolve_session
from core.exceptions import (
    AuthenticationAbsent,
    AuthInfrastructureError,
    AuthorizationDenied,
    NotFound,
    PersistenceError,
)

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_TEMPLATE = "errors/not_authorized.html"
UNAVAILABLE_TEMPLATE = "errors/unavailable.html"


def not_authorized(request):
    return render(request, NOT_AUTHORIZED_TEMPLATE, status=403)


def unavailable(request):
    return render(request, UNAVAILABLE_TEMPLATE, status=503)


def role_view(action, template_name):
    """
    Decorator for views gated by the authorization table:
    - Resolves the caller's identity and passes it to the view as ``identity``
    - No session -> redirect to login (?next= back here)
    - Wrong role -> "not authorized" page (403)
    - NotFound -> 404, storage/identity outages -> generic failure page (503)
    - The view returns an HttpResponse or a context dict for ``template_name``
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            try:
                identity = resolve_session(request.session)
                require(identity, action)
                response = view_func(request, *args, identity=identity, **kwargs)
            except AuthenticationAbsent:
                return redirect_to_login(request.get_full_path(), login_url=reverse("accounts:login"))
            except AuthorizationDenied as e:
                logger.info("Denied %s for role %s on %s", e.action, e.role, request.path)
                return not_authorized(request)
            except NotFound as e:
                raise Http404(str(e)) from e
            except (PersistenceError, AuthInfrastructureError) as e:
                logger.error("Request to %s failed: %s", request.path, e)
                return unavailable(request)

            # If the response is already an HttpResponse, return it
            if isinstance(response, HttpResponse):
                return response

            context = response if isinstance(response, dict) else {}
            context.setdefault("identity", identity)
            return render(request, template_name, context)

        return _wrapped_view
    return decorator
