# core/signals.py
import logging

from django.dispatch import Signal, receiver

from utils.cache_utils import POSTS_VIEW_KEYS, invalidate_cache, posts_by_owner_key

logger = logging.getLogger(__name__)

# Sent after a post write commits. Arguments: post, owner_id.
posts_changed = Signal()


@receiver(posts_changed, dispatch_uid="core.invalidate_post_views")
def invalidate_post_views(sender, post=None, owner_id=None, **kwargs):
    """Retire every cached view that renders a post listing."""
    keys = list(POSTS_VIEW_KEYS)
    if owner_id:
        keys.append(posts_by_owner_key(owner_id))
    invalidate_cache(*keys)
    logger.debug("Invalidated post views: %s", ", ".join(keys))
