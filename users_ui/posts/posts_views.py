# users_ui/posts/posts_views.py
import logging

from django.utils import timezone

from accounts.roles import Action
from core import cms
from core.exceptions import CMSContentError, NotFound
from core.helpers import post_card
from core.queries import get_post_by_id, get_user_by_id, list_posts, list_posts_by_owner
from users_ui.base_views import role_view
from utils.cache_utils import POSTS_LIST_KEY, get_or_set_cache, posts_by_owner_key

logger = logging.getLogger(__name__)


def _home_subtitle():
    try:
        return cms.get_subtitle()
    except (NotFound, CMSContentError) as e:
        logger.warning("Home page rendered without CMS subtitle: %s", e)
        return None


# -------------------------
# Home: CMS subtitle + all posts
# -------------------------
@role_view(Action.READ_POST, "posts_templates/home.html")
def home(request, identity=None):
    posts = get_or_set_cache(POSTS_LIST_KEY, list_posts)
    now = timezone.now()
    return {
        "subtitle": _home_subtitle(),
        "posts": [post_card(post, now=now) for post in posts],
    }


# -------------------------
# Single post
# -------------------------
@role_view(Action.READ_POST, "posts_templates/post_detail.html")
def post_detail(request, post_id, identity=None):
    post = get_post_by_id(post_id)
    return {
        "post": post_card(post),
        "page_title": post.title,
    }


# -------------------------
# Public profile
# -------------------------
@role_view(Action.READ_POST, "posts_templates/user_detail.html")
def user_detail(request, user_id, identity=None):
    user = get_user_by_id(user_id)
    posts = get_or_set_cache(posts_by_owner_key(user.id), lambda: list_posts_by_owner(user.id))
    now = timezone.now()
    return {
        "profile": user,
        "page_title": user.display_name,
        "posts": [post_card(post, now=now) for post in posts],
    }
