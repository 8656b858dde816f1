import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import core.core_models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.CharField(default=core.core_models.new_identifier, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=150, null=True)),
                ("email", models.EmailField(blank=True, max_length=254, null=True, unique=True)),
                ("role", models.CharField(choices=[("reader", "Reader"), ("contributor", "Contributor"), ("admin", "Admin")], default="reader", max_length=20)),
                ("image", models.URLField(blank=True, max_length=500, null=True)),
                ("password", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "users",
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("role__in", ["reader", "contributor", "admin"])),
                        name="users_role_valid",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("post_id", models.CharField(default=core.core_models.new_identifier, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("title", models.TextField()),
                ("details", models.TextField()),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("owner", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.PROTECT, related_name="posts", to="core.user")),
            ],
            options={
                "db_table": "posts",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(models.Q(("title", ""), _negated=True), models.Q(("details", ""), _negated=True)),
                        name="posts_title_details_not_blank",
                    ),
                ],
            },
        ),
    ]
