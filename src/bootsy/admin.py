"""Регистрация галерей Bootsy в админ-панели."""

from __future__ import annotations

from django.contrib import admin

from .models import ImageGallery


@admin.register(ImageGallery)
class ImageGalleryAdmin(admin.ModelAdmin):
    """Настройки админ-панели для галерей изображений."""

    list_display = ("id", "content_type", "object_id", "created_at", "updated_at")
    list_filter = ("content_type",)
    search_fields = ("id", "object_id")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")
