"""Удаление галерей, так и не привязанных к контейнеру."""

from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser

from bootsy.conf import bootsy_settings
from bootsy.services import destroy_orphan_galleries


class Command(BaseCommand):
    help = (
        "Удаляет галереи изображений, которые были созданы для формы, "
        "но так и не привязались к сохранённому объекту."
    )

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--days",
            type=int,
            default=None,
            help="Возраст галереи в днях (по умолчанию BOOTSY['ORPHAN_GALLERY_DAYS']).",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Показать, сколько будет удалено, но не удалять.",
        )

    def handle(self, *args: Any, **options: Any) -> str:
        days: int | None = options["days"]
        dry_run: bool = options["dry_run"]

        if days is None:
            days = bootsy_settings().orphan_gallery_days
        if days < 0:
            raise CommandError("--days не может быть отрицательным")

        count = destroy_orphan_galleries(days, dry_run=dry_run)
        if dry_run:
            self.stdout.write(
                self.style.NOTICE(f"[dry-run] Будет удалено галерей: {count} (старше {days} дн.).")
            )
            return "ok"

        self.stdout.write(self.style.SUCCESS(f"Удалено галерей: {count}."))
        return "ok"
