# users_ui/contributor/contributor_urls.py
from django.urls import path
from . import contributor_views

app_name = "contributor"

urlpatterns = [
    path("", contributor_views.contributor_index, name="dashboard"),
    path("create/", contributor_views.create_post, name="create_post"),
]
