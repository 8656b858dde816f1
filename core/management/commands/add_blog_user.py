from django.core.management.base import BaseCommand, CommandError

from core.core_models import Role
from core.exceptions import PersistenceError
from core.queries import add_user


class Command(BaseCommand):
    help = "Create a user who can sign in with email and password."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("--password", help="Sign-in password (omit for an account without local sign-in).")
        parser.add_argument("--name", help="Display name.")
        parser.add_argument("--role", default=Role.READER, choices=Role.values)
        parser.add_argument("--image", help="Profile image URL.")

    def handle(self, *args, **options):
        try:
            user = add_user(
                options["email"],
                password=options.get("password"),
                name=options.get("name"),
                role=options["role"],
                image=options.get("image"),
            )
        except (ValueError, PersistenceError) as e:
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.SUCCESS(f"Created user {user.id} <{user.email}> as {user.role}."))
