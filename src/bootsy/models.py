"""Модели галереи изображений и контейнера, к которому она привязана."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.db.models import Q
from django.utils import timezone


class ImageGalleryQuerySet(models.QuerySet):
    def unbound(self) -> ImageGalleryQuerySet:
        return self.filter(object_id__isnull=True)

    def orphans(self, older_than: datetime) -> ImageGalleryQuerySet:
        """Галереи, так и не привязанные к контейнеру и созданные раньше `older_than`."""

        return self.unbound().filter(created_at__lt=older_than)


class ImageGallery(models.Model):
    """Набор загружаемых изображений, относящийся к одному контейнеру."""

    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        blank=True,
        null=True,
        verbose_name="Тип контейнера",
    )
    object_id = models.PositiveBigIntegerField("ID контейнера", blank=True, null=True)
    bound_to = GenericForeignKey("content_type", "object_id")
    created_at = models.DateTimeField("Создана", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлена", auto_now=True)

    objects = ImageGalleryQuerySet.as_manager()

    class Meta:
        verbose_name = "Галерея изображений"
        verbose_name_plural = "Галереи изображений"
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=("content_type", "object_id"), name="bootsy_gallery_bound_idx"),
        ]

    def __str__(self) -> str:
        return f"Gallery#{self.pk}"

    @property
    def is_bound(self) -> bool:
        return self.object_id is not None

    def bind(self, container: models.Model) -> bool:
        """Привязывает галерею к сохранённому контейнеру, если она ещё свободна."""

        if self.is_bound or container.pk is None:
            return False
        self.content_type = ContentType.objects.get_for_model(container)
        self.object_id = container.pk
        self.save(update_fields=["content_type", "object_id", "updated_at"])
        return True


class GalleryContainer(models.Model):
    """Абстрактная модель: сущность с nullable-ссылкой на галерею редактора."""

    bootsy_image_gallery = models.ForeignKey(
        ImageGallery,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="+",
        verbose_name="Галерея изображений",
    )

    class Meta:
        abstract = True

    @property
    def is_new_record(self) -> bool:
        return self._state.adding

    def save(self, *args: Any, **kwargs: Any) -> None:
        super().save(*args, **kwargs)
        from bootsy.services import bind_gallery

        bind_gallery(self)

    def delete(self, *args: Any, **kwargs: Any) -> tuple[int, dict[str, int]]:
        gallery_id = self.bootsy_image_gallery_id
        pk = self.pk
        content_type = ContentType.objects.get_for_model(self)
        result = super().delete(*args, **kwargs)
        if gallery_id:
            ImageGallery.objects.filter(pk=gallery_id).filter(
                Q(object_id__isnull=True) | Q(content_type=content_type, object_id=pk)
            ).delete()
        return result


def is_gallery_container(obj: Any) -> bool:
    return isinstance(obj, GalleryContainer)


def gallery_cutoff(days: int) -> datetime:
    return timezone.now() - timedelta(days=days)
