# core/exceptions.py
"""
Error taxonomy for the authoring and reading paths.

Views translate these into responses: validation and authorization failures
re-render in place, persistence and infrastructure failures end the request
with a generic notice, NotFound becomes a 404.
"""


class BlogError(Exception):
    """Base class for every domain error raised by the core."""


class ValidationError(BlogError):
    """Submitted fields failed the schema. ``errors`` maps field -> messages."""

    def __init__(self, errors):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__("; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in self.errors.items()
        ))

    @property
    def fields(self):
        return sorted(self.errors)


class AuthenticationAbsent(BlogError):
    """No session is attached to the request."""


class AuthorizationDenied(BlogError):
    """The caller is signed in but their role does not permit the action."""

    def __init__(self, role, action):
        self.role = role
        self.action = action
        super().__init__(f"Role '{role}' may not {action}")


class AuthInfrastructureError(BlogError):
    """The identity store could not be reached while resolving a session."""


class PersistenceError(BlogError):
    """A storage write or read failed, or a storage invariant was violated."""


class NotFound(BlogError):
    """The requested Post, User or CMS document does not exist."""

    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} '{identifier}' not found")


class CMSContentError(BlogError):
    """A CMS document exists but cannot be decoded."""
