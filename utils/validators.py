# utils/validators.py
from dataclasses import dataclass
from typing import Mapping

from core.exceptions import ValidationError


# -----------------------------
# String Normalization
# -----------------------------
def normalize_string(val) -> str:
    """Trim leading/trailing whitespace. None becomes ''."""
    if val is None:
        return ""
    if isinstance(val, str):
        return val.strip()
    return str(val).strip()


def is_blank(val) -> bool:
    return not normalize_string(val)


# -----------------------------
# Create-post schema
# -----------------------------
@dataclass(frozen=True)
class PostDraft:
    """Validated, trimmed fields of a post submission."""
    title: str
    details: str


CREATE_POST_FIELDS = {
    "title": "Title cannot be empty",
    "details": "Details cannot be empty",
}


def validate_create_post(data: Mapping[str, str]) -> PostDraft:
    """
    Validate a raw "create post" submission.
    Every field is checked so the caller gets all failures at once.
    """
    errors = {}
    cleaned = {}
    for field, message in CREATE_POST_FIELDS.items():
        value = normalize_string(data.get(field))
        if not value:
            errors[field] = [message]
        else:
            cleaned[field] = value

    if errors:
        raise ValidationError(errors)
    return PostDraft(**cleaned)
