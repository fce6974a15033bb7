"""
URL configuration for the naturediary project.

Everything the client talks to lives under /api/ (see diary.urls); the
Django admin is mounted at /admin/.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("diary.urls")),
]
