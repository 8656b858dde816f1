# users_ui/contributor/contributor_views.py
import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from accounts.roles import Action
from core.authoring import submit_post
from core.exceptions import ValidationError
from core.helpers import post_card
from core.queries import list_posts_by_owner
from users_ui.base_views import role_view

from .contributor_forms import CreatePostForm

logger = logging.getLogger(__name__)

CREATE_POST_TEMPLATE = "contributor_templates/create_post.html"


# -------------------------
# Contributor landing page
# -------------------------
@role_view(Action.VIEW_CONTRIBUTOR_AREA, "contributor_templates/contributor_index.html")
def contributor_index(request, identity=None):
    posts = list_posts_by_owner(identity.user_id)
    return {
        "posts": [post_card(post) for post in posts],
        "post_count": len(posts),
    }


# -------------------------
# Create post
# -------------------------
@role_view(Action.CREATE_POST, CREATE_POST_TEMPLATE)
def create_post(request, identity=None):
    """
    GET renders the form. POST publishes through submit_post and redirects to
    the new post; invalid input re-renders the form with per-field messages.
    """
    if request.method != "POST":
        return {"form": CreatePostForm()}

    try:
        post = submit_post(identity, request.POST)
    except ValidationError as e:
        logger.info("Rejected post from %s: %s", identity.user_id, e)
        form = CreatePostForm(request.POST)
        form.is_valid()
        return render(request, CREATE_POST_TEMPLATE, {"form": form, "identity": identity}, status=400)

    messages.success(request, "Post published.")
    return redirect("posts:post_detail", post_id=post.post_id)
