# users_ui/admin_panel/admin_views.py
from accounts.roles import Action
from core.helpers import post_card
from core.queries import count_users_by_role, list_posts
from users_ui.base_views import role_view

RECENT_POSTS = 10


@role_view(Action.VIEW_ADMIN_AREA, "admin_templates/admin_index.html")
def admin_index(request, identity=None):
    """Admin landing page: users per role and the latest posts."""
    posts = list_posts()
    return {
        "role_counts": count_users_by_role(),
        "post_count": len(posts),
        "recent_posts": [post_card(post) for post in posts[:RECENT_POSTS]],
    }
