# core/authoring.py
"""
The "submit new post" pipeline.

    validate -> require a session -> check role -> persist -> invalidate views

The caller's identity is passed in explicitly; nothing is read from the
request here. Each step either returns or raises one of the errors in
core.exceptions, and no step after a failure runs, so a rejected submission
never reaches storage.
"""
import logging
from typing import Mapping, Optional

from accounts.roles import Action, require
from accounts.session import Identity
from core import queries
from core.core_models import Post
from core.signals import posts_changed
from utils.validators import validate_create_post

logger = logging.getLogger(__name__)


def submit_post(identity: Optional[Identity], data: Mapping[str, str]) -> Post:
    draft = validate_create_post(data)
    require(identity, Action.CREATE_POST)

    post = queries.create_post(identity.user_id, draft.title, draft.details)

    # Same step as the write: the issuing caller's next read sees the new post
    posts_changed.send(sender=Post, post=post, owner_id=identity.user_id)
    logger.info("Post %s published by %s (%s)", post.post_id, identity.user_id, identity.role)
    return post
