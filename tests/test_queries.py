"""Tests for the content repository."""

from datetime import timedelta
from unittest.mock import patch

import pytest
from django.db import OperationalError
from django.utils import timezone

from core import queries
from core.core_models import Post, Role
from core.exceptions import NotFound, PersistenceError


@pytest.mark.django_db
class TestCreatePost:

    def test_round_trip(self, contributor):
        created = queries.create_post(contributor.id, "Hello", "World")
        stored = queries.get_post_by_id(created.post_id)
        assert stored.title == "Hello"
        assert stored.details == "World"
        assert stored.owner_id == contributor.id
        assert stored.created_at == created.created_at

    def test_fresh_identifiers(self, contributor):
        first = queries.create_post(contributor.id, "a", "b")
        second = queries.create_post(contributor.id, "a", "b")
        assert first.post_id != second.post_id

    def test_values_are_stored_verbatim(self, contributor):
        post = queries.create_post(contributor.id, "Title", "line 1\n  line 2")
        assert queries.get_post_by_id(post.post_id).details == "line 1\n  line 2"

    def test_unknown_owner_is_persistence_error(self):
        with pytest.raises(PersistenceError):
            queries.create_post("no-such-user", "Hello", "World")
        assert Post.objects.count() == 0

    def test_storage_failure_is_persistence_error(self, contributor):
        with patch.object(Post.objects, "create", side_effect=OperationalError("disk I/O error")):
            with pytest.raises(PersistenceError):
                queries.create_post(contributor.id, "Hello", "World")
        assert Post.objects.count() == 0


@pytest.mark.django_db
class TestReadPosts:

    def test_get_post_by_id_not_found(self):
        with pytest.raises(NotFound) as exc_info:
            queries.get_post_by_id("nonexistent")
        assert exc_info.value.kind == "Post"
        assert exc_info.value.identifier == "nonexistent"

    def test_list_posts_newest_first(self, contributor, admin_user):
        now = timezone.now()
        oldest = Post.objects.create(owner=contributor, title="old", details="x", created_at=now - timedelta(days=2))
        newest = Post.objects.create(owner=admin_user, title="new", details="x", created_at=now)
        middle = Post.objects.create(owner=contributor, title="mid", details="x", created_at=now - timedelta(hours=1))

        result = queries.list_posts()

        assert [p.post_id for p in result] == [newest.post_id, middle.post_id, oldest.post_id]
        assert isinstance(result, list)

    def test_list_posts_joins_owner(self, contributor, django_assert_num_queries):
        queries.create_post(contributor.id, "a", "b")
        queries.create_post(contributor.id, "c", "d")
        with django_assert_num_queries(1):
            names = [p.owner.name for p in queries.list_posts()]
        assert names == ["Carl Contributor", "Carl Contributor"]

    def test_list_posts_is_a_snapshot(self, contributor):
        queries.create_post(contributor.id, "a", "b")
        snapshot = queries.list_posts()
        queries.create_post(contributor.id, "c", "d")
        assert len(snapshot) == 1

    def test_list_posts_by_owner(self, contributor, admin_user):
        queries.create_post(contributor.id, "mine", "x")
        queries.create_post(admin_user.id, "theirs", "x")
        assert [p.title for p in queries.list_posts_by_owner(contributor.id)] == ["mine"]

    def test_read_failure_is_persistence_error(self):
        with patch.object(Post.objects, "select_related", side_effect=OperationalError("gone")):
            with pytest.raises(PersistenceError):
                queries.list_posts()


@pytest.mark.django_db
class TestUsers:

    def test_get_user_by_id_not_found(self):
        with pytest.raises(NotFound):
            queries.get_user_by_id("nobody")

    def test_add_user_defaults_to_reader(self):
        user = queries.add_user("New@Example.com")
        assert user.role == Role.READER
        assert user.email == "new@example.com"
        assert user.password is None

    def test_add_user_hashes_password(self):
        user = queries.add_user("p@example.com", password="s3cret")
        assert user.password != "s3cret"
        assert queries.check_password(user, "s3cret")
        assert not queries.check_password(user, "wrong")

    def test_add_user_rejects_duplicate_email(self):
        queries.add_user("dup@example.com")
        with pytest.raises(ValueError):
            queries.add_user("DUP@example.com")

    def test_add_user_rejects_unknown_role(self):
        with pytest.raises(ValueError):
            queries.add_user("x@example.com", role="owner")

    def test_set_user_role(self, reader):
        queries.set_user_role(reader.id, "admin")
        reader.refresh_from_db()
        assert reader.role == "admin"

    def test_get_user_by_email_is_case_insensitive(self, contributor):
        assert queries.get_user_by_email(contributor.email.upper()) == contributor
        assert queries.get_user_by_email("") is None

    def test_count_users_by_role(self, reader, contributor, make_user):
        make_user(Role.CONTRIBUTOR)
        assert queries.count_users_by_role() == {"reader": 1, "contributor": 2, "admin": 0}
