# blogsite/main_urls.py
from django.urls import path, include

# --- URL patterns ---
urlpatterns = [
    # Public pages: home, posts, profiles
    path("", include("users_ui.posts.posts_urls")),

    # Role areas
    path("contributor/", include("users_ui.contributor.contributor_urls")),
    path("admin-panel/", include("users_ui.admin_panel.admin_urls")),

    # Authentication routes
    path("accounts/", include("accounts.auth_urls")),
]
