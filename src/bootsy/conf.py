"""Чтение настроек Bootsy из `settings.BOOTSY`."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from bootsy.constants import (
    DATA_PREFIX,
    DEFAULT_EDITOR_OPTIONS,
    ELEMENT_ID_PREFIX,
    ORPHAN_GALLERY_DAYS,
)


class BootsyConfigurationError(ImproperlyConfigured):
    """Некорректное значение в `settings.BOOTSY`."""


@dataclass(frozen=True, slots=True)
class BootsySettings:
    """Глобальная конфигурация редактора."""

    editor_options: Mapping[str, bool] = field(
        default_factory=lambda: dict(DEFAULT_EDITOR_OPTIONS)
    )
    data_prefix: str = DATA_PREFIX
    element_id_prefix: str = ELEMENT_ID_PREFIX
    orphan_gallery_days: int = ORPHAN_GALLERY_DAYS


def _editor_options(raw: Any) -> dict[str, bool]:
    if raw is None:
        return dict(DEFAULT_EDITOR_OPTIONS)
    if not isinstance(raw, Mapping):
        raise BootsyConfigurationError("BOOTSY['EDITOR_OPTIONS'] должен быть словарём")
    options = dict(DEFAULT_EDITOR_OPTIONS)
    for key, value in raw.items():
        if not isinstance(value, bool):
            raise BootsyConfigurationError(
                f"BOOTSY['EDITOR_OPTIONS'][{key!r}] должен быть True или False"
            )
        options[str(key)] = value
    return options


def _prefix(raw: Any, default: str, name: str) -> str:
    if raw is None:
        return default
    if not isinstance(raw, str):
        raise BootsyConfigurationError(f"BOOTSY[{name!r}] должен быть строкой")
    return raw


def bootsy_settings() -> BootsySettings:
    """Возвращает актуальные настройки, учитывая `override_settings` в тестах."""

    raw = getattr(settings, "BOOTSY", None) or {}
    if not isinstance(raw, Mapping):
        raise BootsyConfigurationError("settings.BOOTSY должен быть словарём")

    days = raw.get("ORPHAN_GALLERY_DAYS", ORPHAN_GALLERY_DAYS)
    if isinstance(days, bool) or not isinstance(days, int) or days < 0:
        raise BootsyConfigurationError(
            "BOOTSY['ORPHAN_GALLERY_DAYS'] должен быть неотрицательным целым"
        )

    return BootsySettings(
        editor_options=_editor_options(raw.get("EDITOR_OPTIONS")),
        data_prefix=_prefix(raw.get("DATA_PREFIX"), DATA_PREFIX, "DATA_PREFIX"),
        element_id_prefix=_prefix(
            raw.get("ELEMENT_ID_PREFIX"), ELEMENT_ID_PREFIX, "ELEMENT_ID_PREFIX"
        ),
        orphan_gallery_days=days,
    )
