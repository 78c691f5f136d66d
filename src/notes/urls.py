"""Маршруты приложения notes."""

from django.urls import path

from .views import NoteCreateView, NoteUpdateView, comment_create

app_name = "notes"

urlpatterns = [
    path("create/", NoteCreateView.as_view(), name="create"),
    path("<int:pk>/", NoteUpdateView.as_view(), name="update"),
    path("<int:pk>/comments/", comment_create, name="comment-create"),
]
