"""Жизненный цикл галерей: создание по требованию и очистка сирот."""

from __future__ import annotations

from django.db import transaction

from bootsy.conf import bootsy_settings
from bootsy.logging import event_logger, logging_context
from bootsy.models import GalleryContainer, ImageGallery, gallery_cutoff

logger = event_logger("bootsy.galleries")


def ensure_gallery(container: GalleryContainer) -> int:
    """Возвращает id галереи контейнера, создавая её при отсутствии.

    Новая галерея создаётся только если у контейнера ещё нет
    `bootsy_image_gallery_id`. Для уже сохранённого контейнера поле
    записывается в базу сразу; несохранённый контейнер получит его
    при отправке формы через скрытое поле. Ошибки ORM не перехватываются.
    """

    gallery_id = container.bootsy_image_gallery_id
    if gallery_id:
        return gallery_id

    gallery = ImageGallery.objects.create()
    container.bootsy_image_gallery = gallery
    if not container.is_new_record:
        with logging_context(gallery_id=gallery.pk):
            container.save(update_fields=["bootsy_image_gallery"])
    logger.info(
        "gallery_created",
        gallery_id=gallery.pk,
        container=container.__class__.__name__,
        container_id=container.pk,
    )
    return gallery.pk


def bind_gallery(container: GalleryContainer) -> bool:
    """Привязывает галерею контейнера к нему самому после сохранения."""

    gallery_id = container.bootsy_image_gallery_id
    if not gallery_id or container.pk is None:
        return False
    gallery = ImageGallery.objects.filter(pk=gallery_id).first()
    if gallery is None or not gallery.bind(container):
        return False
    logger.info(
        "gallery_bound",
        gallery_id=gallery.pk,
        container=container.__class__.__name__,
        container_id=container.pk,
    )
    return True


def destroy_orphan_galleries(days: int | None = None, *, dry_run: bool = False) -> int:
    """Удаляет галереи, не привязанные к контейнеру дольше `days` дней."""

    if days is None:
        days = bootsy_settings().orphan_gallery_days
    orphans = ImageGallery.objects.orphans(gallery_cutoff(days))
    if dry_run:
        count = orphans.count()
        logger.info("orphan_galleries_found", count=count, days=days)
        return count

    with transaction.atomic():
        deleted = orphans.delete()[1].get(ImageGallery._meta.label, 0)
    logger.info("orphan_galleries_destroyed", count=deleted, days=days)
    return deleted
