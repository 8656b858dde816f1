# core/core_models.py
import uuid

from django.db import models
from django.db.models import Q
from django.utils import timezone


def new_identifier() -> str:
    return uuid.uuid4().hex


class Role(models.TextChoices):
    READER = "reader", "Reader"
    CONTRIBUTOR = "contributor", "Contributor"
    ADMIN = "admin", "Admin"


# -------------------------
# Users
# -------------------------
class User(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=new_identifier, editable=False)
    name = models.CharField(max_length=150, blank=True, null=True)
    email = models.EmailField(max_length=254, unique=True, blank=True, null=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.READER)
    image = models.URLField(max_length=500, blank=True, null=True)
    # bcrypt hash for the local sign-in form; accounts from an external provider leave it empty
    password = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "users"
        constraints = [
            models.CheckConstraint(
                condition=Q(role__in=[choice.value for choice in Role]),
                name="users_role_valid",
            ),
        ]

    def __str__(self):
        return f"{self.name or self.id} ({self.role})"

    @property
    def display_name(self):
        return self.name or f"User {self.id}"


# -------------------------
# Posts
# -------------------------
class Post(models.Model):
    post_id = models.CharField(primary_key=True, max_length=64, default=new_identifier, editable=False)
    title = models.TextField()
    details = models.TextField()
    owner = models.ForeignKey(User, on_delete=models.PROTECT, related_name="posts", db_column="user_id")
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=~Q(title="") & ~Q(details=""),
                name="posts_title_details_not_blank",
            ),
        ]

    def __str__(self):
        return f"Post {self.post_id} - {self.title}"
