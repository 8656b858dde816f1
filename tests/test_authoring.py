"""Tests for the submit-post pipeline: validation, gate, write, invalidation."""

from unittest.mock import patch

import pytest

from accounts.session import Identity
from core import queries
from core.authoring import submit_post
from core.core_models import Post
from core.exceptions import (
    AuthenticationAbsent,
    AuthorizationDenied,
    PersistenceError,
    ValidationError,
)
from core.signals import posts_changed
from utils.cache_utils import POSTS_LIST_KEY, get_or_set_cache, posts_by_owner_key


def identity_for(user):
    return Identity(user_id=user.id, role=user.role)


@pytest.mark.django_db
class TestSubmitPost:

    def test_contributor_post_is_trimmed_and_stored(self, contributor):
        post = submit_post(identity_for(contributor), {"title": "  Hello ", "details": "World"})
        stored = queries.get_post_by_id(post.post_id)
        assert stored.title == "Hello"
        assert stored.details == "World"
        assert stored.owner_id == contributor.id

    def test_admin_may_post(self, admin_user):
        post = submit_post(identity_for(admin_user), {"title": "t", "details": "d"})
        assert post.owner_id == admin_user.id

    def test_empty_title_rejected_without_write(self, contributor):
        with patch("core.authoring.queries.create_post") as create:
            with pytest.raises(ValidationError) as exc_info:
                submit_post(identity_for(contributor), {"title": "", "details": "x"})
        assert exc_info.value.fields == ["title"]
        create.assert_not_called()

    @pytest.mark.parametrize("title,details", [(" ", "x"), ("x", "   "), ("\t", "\n")])
    def test_blank_fields_never_reach_storage(self, contributor, title, details):
        with pytest.raises(ValidationError):
            submit_post(identity_for(contributor), {"title": title, "details": details})
        assert Post.objects.count() == 0

    def test_anonymous_is_authentication_absent(self):
        with patch("core.authoring.queries.create_post") as create:
            with pytest.raises(AuthenticationAbsent):
                submit_post(None, {"title": "Hello", "details": "World"})
        create.assert_not_called()

    def test_reader_is_denied(self, reader):
        with patch("core.authoring.queries.create_post") as create:
            with pytest.raises(AuthorizationDenied):
                submit_post(identity_for(reader), {"title": "Hello", "details": "World"})
        create.assert_not_called()
        assert Post.objects.count() == 0

    def test_persistence_error_propagates_without_invalidation(self, contributor):
        get_or_set_cache(POSTS_LIST_KEY, lambda: ["stale"])
        with patch("core.authoring.queries.create_post", side_effect=PersistenceError("down")):
            with pytest.raises(PersistenceError):
                submit_post(identity_for(contributor), {"title": "Hello", "details": "World"})
        assert get_or_set_cache(POSTS_LIST_KEY, queries.list_posts) == ["stale"]


@pytest.mark.django_db
class TestInvalidation:

    def test_successful_create_drops_cached_listings(self, contributor):
        get_or_set_cache(POSTS_LIST_KEY, lambda: ["stale"])
        get_or_set_cache(posts_by_owner_key(contributor.id), lambda: ["stale"])

        post = submit_post(identity_for(contributor), {"title": "Hello", "details": "World"})

        listed = get_or_set_cache(POSTS_LIST_KEY, queries.list_posts)
        owned = get_or_set_cache(
            posts_by_owner_key(contributor.id), lambda: queries.list_posts_by_owner(contributor.id)
        )
        assert [p.post_id for p in listed] == [post.post_id]
        assert [p.post_id for p in owned] == [post.post_id]

    def test_other_owners_listing_is_kept(self, contributor, admin_user):
        get_or_set_cache(posts_by_owner_key(admin_user.id), lambda: ["kept"])
        submit_post(identity_for(contributor), {"title": "Hello", "details": "World"})
        assert get_or_set_cache(posts_by_owner_key(admin_user.id), lambda: ["rebuilt"]) == ["kept"]

    def test_fill_racing_a_create_does_not_hide_it(self, contributor):
        created = []

        def build_then_create():
            snapshot = queries.list_posts()
            # A create commits while this fill is still in flight
            created.append(submit_post(identity_for(contributor), {"title": "Hello", "details": "World"}))
            return snapshot

        assert get_or_set_cache(POSTS_LIST_KEY, build_then_create) == []

        listed = get_or_set_cache(POSTS_LIST_KEY, queries.list_posts)
        assert [p.post_id for p in listed] == [created[0].post_id]

    def test_signal_carries_post_and_owner(self, contributor):
        received = []

        def listener(sender, post=None, owner_id=None, **kwargs):
            received.append((sender, post.post_id, owner_id))

        posts_changed.connect(listener)
        try:
            post = submit_post(identity_for(contributor), {"title": "Hello", "details": "World"})
        finally:
            posts_changed.disconnect(listener)

        assert received == [(Post, post.post_id, contributor.id)]

    def test_rejected_submission_sends_nothing(self, reader):
        received = []

        def listener(sender, **kwargs):
            received.append(kwargs)

        posts_changed.connect(listener)
        try:
            with pytest.raises(AuthorizationDenied):
                submit_post(identity_for(reader), {"title": "Hello", "details": "World"})
        finally:
            posts_changed.disconnect(listener)
        assert received == []
