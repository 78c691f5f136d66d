"""Интеграция редактора Bootsy с формами Django."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django import forms

from bootsy.constants import GALLERY_ID_FIELD, PASS_THROUGH_ATTRIBUTES
from bootsy.counter import RenderCounter
from bootsy.helpers import bootsy_editor
from bootsy.models import ImageGallery, is_gallery_container


class BootsyEditorWidget(forms.Widget):
    """Виджет поля формы, отрисовывающий `<trix-editor>` со скрытым полем."""

    def __init__(
        self,
        attrs: dict[str, Any] | None = None,
        *,
        editor_options: Mapping[str, bool] | None = None,
        uploader: bool | None = None,
        container: Any = None,
        data: Mapping[str, Any] | None = None,
        counter: RenderCounter | None = None,
    ) -> None:
        super().__init__(attrs)
        self.editor_options = dict(editor_options or {})
        self.uploader = uploader
        self.container = container
        self.data = dict(data or {})
        self.counter = counter
        self.bound_object: Any = None
        self.gallery_field: str | None = None

    def bind(self, instance: Any, *, gallery_field: str | None = None) -> None:
        """Связывает виджет с объектом формы, как это делает ModelForm."""

        self.bound_object = instance
        self.gallery_field = gallery_field

    def editor_options_for(self, attrs: Mapping[str, Any]) -> dict[str, Any]:
        options: dict[str, Any] = {
            key: attrs[key] for key in PASS_THROUGH_ATTRIBUTES if key in attrs
        }
        if attrs.get("id"):
            options["id"] = attrs["id"]
        if self.editor_options:
            options["editor_options"] = self.editor_options
        if self.uploader is not None:
            options["uploader"] = self.uploader
        if self.container is not None:
            options["container"] = self.container
        if self.bound_object is not None:
            options["object"] = self.bound_object
        if self.gallery_field:
            options["gallery_field"] = self.gallery_field
        if self.data:
            options["data"] = self.data
        return options

    def render(self, name, value, attrs=None, renderer=None):
        final_attrs = self.build_attrs(self.attrs, attrs)
        return bootsy_editor(
            None,
            name,
            self.editor_options_for(final_attrs),
            counter=self.counter,
            value=self.format_value(value),
        )

    def value_from_datadict(self, data, files, name):
        return data.get(name)


class BootsyModelFormMixin:
    """Подключает виджеты Bootsy к экземпляру ModelForm.

    Для несохранённого контейнера виджет выводит скрытое поле с id
    галереи; при сохранении формы галерея назначается объекту, если она
    ещё ни к чему не привязана.
    """

    gallery_field_name = GALLERY_ID_FIELD

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        gallery_field = self.add_prefix(self.gallery_field_name)
        for field in self.fields.values():
            if isinstance(field.widget, BootsyEditorWidget):
                field.widget.bind(self.instance, gallery_field=gallery_field)

    def submitted_gallery(self) -> ImageGallery | None:
        raw = self.data.get(self.add_prefix(self.gallery_field_name)) if self.is_bound else None
        if not raw:
            return None
        try:
            gallery_id = int(raw)
        except (TypeError, ValueError):
            return None
        return ImageGallery.objects.unbound().filter(pk=gallery_id).first()

    def clean(self) -> dict[str, Any]:
        cleaned_data = super().clean()
        instance = self.instance
        if is_gallery_container(instance) and not instance.bootsy_image_gallery_id:
            gallery = self.submitted_gallery()
            if gallery is not None:
                instance.bootsy_image_gallery = gallery
        return cleaned_data
