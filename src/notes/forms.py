"""Формы заметок с редактором Bootsy."""

from __future__ import annotations

from django import forms

from bootsy.forms import BootsyEditorWidget, BootsyModelFormMixin
from notes.models import Note


class NoteForm(BootsyModelFormMixin, forms.ModelForm):
    """Создание и редактирование заметки."""

    class Meta:
        model = Note
        fields = ("title", "body")
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "body": BootsyEditorWidget(
                attrs={"class": "form-control", "placeholder": "Текст заметки"},
            ),
        }
