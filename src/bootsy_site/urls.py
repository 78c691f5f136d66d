"""Корневая URL-конфигурация демонстрационного проекта."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("notes/", include("notes.urls")),
]
