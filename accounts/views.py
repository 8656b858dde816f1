# accounts/views.py
import logging

from django.contrib import messages
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme

from core.exceptions import PersistenceError
from core.queries import check_password, get_user_by_email

from .forms import LoginForm
from .roles import home_path_for
from .session import end_session, start_session

logger = logging.getLogger(__name__)


def _safe_next(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return None


# -------------------------------------------------------------------
# Login view
# -------------------------------------------------------------------
def login_view(request):
    """
    Sign in with email + password.
    On success go to ?next= when it is a local URL, else the role's landing page.
    """
    form = LoginForm(request.POST or None)
    context = {"form": form, "next": _safe_next(request) or ""}

    if request.method == "POST" and form.is_valid():
        email = form.cleaned_data["email"]
        password = form.cleaned_data["password"]

        try:
            user = get_user_by_email(email)
        except PersistenceError:
            messages.error(request, "Sign-in is unavailable right now. Please try again.")
            return render(request, "accounts/login.html", context, status=503)

        if user and check_password(user, password):
            start_session(request, user)
            messages.success(request, f"Welcome back, {user.display_name}.")
            return redirect(_safe_next(request) or home_path_for(user.role))

        logger.info("Failed sign-in attempt for %s", email)
        messages.error(request, "Incorrect email or password.")
        return render(request, "accounts/login.html", context, status=401)

    return render(request, "accounts/login.html", context)


# -------------------------------------------------------------------
# Logout view
# -------------------------------------------------------------------
def logout_view(request):
    """Clear the session and return to the home page."""
    end_session(request)
    messages.info(request, "You have been signed out.")
    return redirect("/")
