"""Построение разметки редактора Bootsy для серверных форм."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from django import forms
from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from bootsy.conf import bootsy_settings
from bootsy.constants import (
    EDITOR_TAG,
    GALLERY_DATA_KEY,
    GALLERY_ID_CLASS,
    GALLERY_ID_FIELD,
    PASS_THROUGH_ATTRIBUTES,
)
from bootsy.counter import RenderCounter, next_element_id
from bootsy.logging import event_logger, logging_context
from bootsy.models import is_gallery_container
from bootsy.options import data_attributes, deep_merge, merge_editor_options
from bootsy.services import ensure_gallery

logger = event_logger("bootsy.helpers")


def field_name(object_name: str | None, method: str) -> str:
    """`post`, `body` -> `post[body]`; без имени объекта возвращает `method`."""

    if not object_name:
        return method
    return f"{object_name}[{method}]"


def _is_blank(value: Any) -> bool:
    return not value or (isinstance(value, str) and not value.strip())


def enable_uploader(options: Mapping[str, Any]) -> bool:
    """Решает, доступна ли загрузка изображений для данного вызова."""

    if options.get("uploader") is False:
        return False
    container = options.get("container")
    if is_gallery_container(container):
        return True
    if _is_blank(container) and is_gallery_container(options.get("object")):
        return True
    return False


def resolve_container(options: Mapping[str, Any]) -> Any:
    container = options.get("container")
    return options.get("object") if _is_blank(container) else container


def editor_configuration(options: Mapping[str, Any]) -> dict[str, Any]:
    """Флаги редактора: глобальные умолчания, переопределения, флаг загрузчика."""

    return merge_editor_options(
        bootsy_settings().editor_options,
        options.get("editor_options"),
        uploader=enable_uploader(options),
    )


def input_id(options: Mapping[str, Any], counter: RenderCounter | None = None) -> str:
    explicit = options.get("id")
    if explicit:
        return str(explicit)
    return next_element_id(counter, prefix=bootsy_settings().element_id_prefix)


def _data_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, default=str)
    return str(value)


def tag_attributes(options: Mapping[str, Any], element_id: str) -> dict[str, Any]:
    """Атрибуты тега редактора: class/placeholder/autofocus, input и data-*."""

    attrs: dict[str, Any] = {
        key: options[key] for key in PASS_THROUGH_ATTRIBUTES if key in options
    }
    attrs["input"] = element_id
    data = data_attributes(
        options.get("data"),
        editor_configuration(options),
        prefix=bootsy_settings().data_prefix,
    )
    for key, value in data.items():
        if value is not None:
            attrs[f"data-{key}"] = _data_value(value)
    return attrs


def editor_tag(attrs: Mapping[str, Any]) -> SafeString:
    return format_html("<{tag}{attrs}></{tag}>", tag=EDITOR_TAG, attrs=flatatt(attrs))


def hidden_field(name: str, value: Any = None, attrs: Mapping[str, Any] | None = None) -> SafeString:
    return forms.HiddenInput().render(name, value, attrs=dict(attrs or {}))


def gallery_id_field(
    object_name: str | None, container: Any, name: str | None = None
) -> SafeString:
    """Скрытое поле с id галереи для ещё не сохранённого контейнера."""

    attrs = {"class": GALLERY_ID_CLASS}
    if object_name:
        attrs["id"] = f"{object_name}_{GALLERY_ID_FIELD}"
    return hidden_field(
        name or field_name(object_name, GALLERY_ID_FIELD),
        container.bootsy_image_gallery_id,
        attrs,
    )


def bootsy_editor(
    object_name: str | None,
    method: str,
    options: Mapping[str, Any] | None = None,
    *,
    counter: RenderCounter | None = None,
    value: Any = None,
    **extra: Any,
) -> SafeString:
    """Возвращает тег `<trix-editor>` и связанные с ним скрытые поля.

    object_name - имя объекта формы (`post`), из него строятся имена полей.
    method      - атрибут объекта, который редактируется (`body`).
    options     - словарь опций (можно передавать и именованными аргументами):
                  container      - модель `GalleryContainer` для галереи;
                                   по умолчанию `object`, если это контейнер.
                  uploader       - False отключает загрузку изображений.
                  editor_options - булевы флаги, переопределяющие
                                   `BOOTSY["EDITOR_OPTIONS"]`.
                  class, placeholder, autofocus - атрибуты тега редактора.
                  id             - явный id скрытого поля.
                  data           - дополнительные data-атрибуты.
                  object         - объект, привязанный к шаблону.
                  gallery_field  - имя скрытого поля с id галереи;
                                   по умолчанию `<object_name>[bootsy_image_gallery_id]`.
    counter     - счётчик для генерации id; по умолчанию общий для процесса.
    value       - значение скрытого поля; по умолчанию `object.<method>`.
    """

    options = deep_merge(options, extra)
    uploader = enable_uploader(options)
    container = resolve_container(options)

    gallery_id = None
    if uploader:
        gallery_id = ensure_gallery(container)
        gallery_key = f"{bootsy_settings().data_prefix}{GALLERY_DATA_KEY}"
        options = deep_merge(options, {"data": {gallery_key: gallery_id}})

    with logging_context(gallery_id=gallery_id):
        element_id = input_id(options, counter)
        if value is None and options.get("object") is not None:
            value = getattr(options["object"], method, None)

        html = editor_tag(tag_attributes(options, element_id)) + hidden_field(
            field_name(object_name, method), value, {"id": element_id}
        )
        if uploader and container.is_new_record:
            html += gallery_id_field(object_name, container, options.get("gallery_field"))

        logger.debug(
            "editor_rendered",
            element_id=element_id,
            field=field_name(object_name, method),
            uploader=uploader,
        )
    return mark_safe(html)
