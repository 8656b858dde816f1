# users_ui/admin_panel/admin_urls.py
from django.urls import path
from . import admin_views

app_name = "admin_panel"

urlpatterns = [
    path("", admin_views.admin_index, name="dashboard"),
]
