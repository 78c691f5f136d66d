"""Конфигурация приложения bootsy."""

from django.apps import AppConfig


class BootsyConfig(AppConfig):
    """Конфигурация приложения bootsy."""
    default_auto_field = "django.db.models.BigAutoField"
    name = "bootsy"
    verbose_name = "Bootsy"
