# users_ui/posts/posts_urls.py
from django.urls import path
from . import posts_views

app_name = "posts"

urlpatterns = [
    path("", posts_views.home, name="home"),
    path("post/<str:post_id>/", posts_views.post_detail, name="post_detail"),
    path("user/<str:user_id>/", posts_views.user_detail, name="user_detail"),
]
