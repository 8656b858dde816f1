"""Shared fixtures: users per role, a signed-in test client, a clean cache."""

import pytest
from django.core.cache import cache

from core.core_models import Role, User


@pytest.fixture(autouse=True)
def clear_view_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    """Factory for users; no password so bcrypt stays out of most tests."""
    counter = {"n": 0}

    def _make(role=Role.READER, name=None, email=None, **extra):
        counter["n"] += 1
        n = counter["n"]
        return User.objects.create(
            name=name if name is not None else f"{role} {n}",
            email=email or f"{role}{n}@example.com",
            role=role,
            **extra,
        )

    return _make


@pytest.fixture
def reader(make_user):
    return make_user(Role.READER, name="Rita Reader")


@pytest.fixture
def contributor(make_user):
    return make_user(Role.CONTRIBUTOR, name="Carl Contributor")


@pytest.fixture
def admin_user(make_user):
    return make_user(Role.ADMIN, name="Ada Admin")


def sign_in(client, user):
    session = client.session
    session["authenticated"] = True
    session["user_id"] = user.id
    session.save()
    return client


@pytest.fixture
def signed_in(client):
    """Return a helper that signs ``client`` in as the given user."""
    def _sign_in(user):
        return sign_in(client, user)
    return _sign_in
