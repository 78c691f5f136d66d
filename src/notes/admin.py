"""Регистрация заметок в админ-панели."""

from __future__ import annotations

from django.contrib import admin

from .models import Comment, Note


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "bootsy_image_gallery", "created_at")
    search_fields = ("title",)
    readonly_fields = ("bootsy_image_gallery", "created_at")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "note", "created_at")
    list_select_related = ("note",)
