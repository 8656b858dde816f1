from django.core.management.base import BaseCommand, CommandError

from core.core_models import Role
from core.exceptions import NotFound, PersistenceError
from core.queries import get_user_by_email, set_user_role


class Command(BaseCommand):
    help = "Change a user's role (reader, contributor, admin). Takes a user id or an email."

    def add_arguments(self, parser):
        parser.add_argument("user", help="User id or email.")
        parser.add_argument("role", choices=Role.values)

    def handle(self, *args, **options):
        target = options["user"]
        try:
            user = get_user_by_email(target) if "@" in target else None
            user = set_user_role(user.id if user else target, options["role"])
        except (NotFound, ValueError, PersistenceError) as e:
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.SUCCESS(f"User {user.id} is now {user.role}."))
