"""Модели заметок, использующих редактор Bootsy."""

from __future__ import annotations

from django.db import models

from bootsy.models import GalleryContainer


class Note(GalleryContainer):
    """Заметка с богатым текстом и собственной галереей изображений."""

    title = models.CharField("Заголовок", max_length=255)
    body = models.TextField("Текст", blank=True)
    created_at = models.DateTimeField("Создана", auto_now_add=True)

    class Meta:
        verbose_name = "Заметка"
        verbose_name_plural = "Заметки"
        ordering = ("-created_at",)

    def __str__(self) -> str:
        return self.title


class Comment(models.Model):
    """Комментарий без галереи: редактор для него работает без загрузки."""

    note = models.ForeignKey(
        Note,
        on_delete=models.CASCADE,
        related_name="comments",
        verbose_name="Заметка",
    )
    body = models.TextField("Текст", blank=True)
    created_at = models.DateTimeField("Создан", auto_now_add=True)

    class Meta:
        verbose_name = "Комментарий"
        verbose_name_plural = "Комментарии"
        ordering = ("created_at",)

    def __str__(self) -> str:
        return f"Comment#{self.pk}"
