"""Слияние опций редактора и построение data-атрибутов."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bootsy.constants import DATA_PREFIX


def deep_merge(base: Mapping[str, Any] | None, override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Рекурсивно объединяет словари, не изменяя исходные."""

    merged: dict[str, Any] = dict(base or {})
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True, slots=True)
class EditorOptions:
    """Набор булевых флагов, управляющих возможностями редактора.

    Порядок приоритета: значения по умолчанию, затем переопределения
    конкретного вызова, затем вычисленный флаг `uploader`.
    """

    flags: Mapping[str, Any] = field(default_factory=dict)

    def merged(self, overrides: Mapping[str, Any] | None) -> EditorOptions:
        return EditorOptions(flags=deep_merge(self.flags, overrides))

    def with_uploader(self, enabled: bool) -> EditorOptions:
        return self.merged({"uploader": enabled})

    def as_data(self, prefix: str = DATA_PREFIX) -> dict[str, Any]:
        return {f"{prefix}{key}": value for key, value in self.flags.items()}

    def as_dict(self) -> dict[str, Any]:
        return dict(self.flags)


def merge_editor_options(
    defaults: Mapping[str, Any] | None,
    overrides: Mapping[str, Any] | None,
    *,
    uploader: bool,
) -> dict[str, Any]:
    """Возвращает итоговую конфигурацию редактора."""

    return EditorOptions(flags=dict(defaults or {})).merged(overrides).with_uploader(uploader).as_dict()


def data_attributes(
    data: Mapping[str, Any] | None,
    configuration: Mapping[str, Any],
    *,
    prefix: str = DATA_PREFIX,
) -> dict[str, Any]:
    """Объединяет пользовательские data-атрибуты с конфигурацией редактора."""

    return deep_merge(data, EditorOptions(flags=dict(configuration)).as_data(prefix))
