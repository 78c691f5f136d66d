"""Тесты виджета редактора и миксина ModelForm."""

from __future__ import annotations

from django import forms
from django.contrib.contenttypes.models import ContentType
from django.test import TestCase

from bootsy.counter import RenderCounter
from bootsy.forms import BootsyEditorWidget
from bootsy.models import ImageGallery
from notes.forms import NoteForm
from notes.models import Note


class CommentBodyForm(forms.Form):
    body = forms.CharField(
        required=False,
        widget=BootsyEditorWidget(
            attrs={"placeholder": "Комментарий"},
            editor_options={"lists": False},
            counter=RenderCounter(),
        ),
    )


class BootsyEditorWidgetTests(TestCase):
    def test_plain_form_renders_editor_without_uploader(self) -> None:
        form = CommentBodyForm(initial={"body": "Привет"})

        html = str(form["body"])

        self.assertInHTML(
            '<trix-editor placeholder="Комментарий" input="id_body" '
            'data-bootsy-lists="false" data-bootsy-uploader="false"></trix-editor>',
            html,
        )
        self.assertInHTML('<input type="hidden" name="body" id="id_body" value="Привет">', html)
        self.assertFalse(ImageGallery.objects.exists())

    def test_value_from_datadict_reads_field_name(self) -> None:
        form = CommentBodyForm(data={"body": "<div>текст</div>"})

        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["body"], "<div>текст</div>")


class NoteFormTests(TestCase):
    def test_new_note_form_renders_gallery_field(self) -> None:
        form = NoteForm()

        html = str(form["body"])

        gallery = ImageGallery.objects.get()
        self.assertIn(f'data-bootsy-gallery_id="{gallery.pk}"', html)
        self.assertInHTML(
            f'<input type="hidden" name="bootsy_image_gallery_id" value="{gallery.pk}" '
            'class="bootsy_image_gallery_id">',
            html,
        )

    def test_prefixed_form_uses_prefixed_gallery_field(self) -> None:
        form = NoteForm(prefix="note")

        html = str(form["body"])

        self.assertIn('name="note-bootsy_image_gallery_id"', html)
        self.assertIn('name="note-body"', html)

    def test_submitted_gallery_is_assigned_and_bound(self) -> None:
        gallery = ImageGallery.objects.create()
        form = NoteForm(
            data={
                "title": "Заметка",
                "body": "<div>текст</div>",
                "bootsy_image_gallery_id": str(gallery.pk),
            }
        )

        self.assertTrue(form.is_valid(), form.errors)
        note = form.save()

        self.assertEqual(note.bootsy_image_gallery_id, gallery.pk)
        gallery.refresh_from_db()
        self.assertEqual(gallery.content_type, ContentType.objects.get_for_model(Note))
        self.assertEqual(gallery.object_id, note.pk)

    def test_invalid_gallery_id_is_ignored(self) -> None:
        form = NoteForm(data={"title": "Заметка", "body": "", "bootsy_image_gallery_id": "abc"})

        self.assertTrue(form.is_valid(), form.errors)
        note = form.save()

        self.assertIsNone(note.bootsy_image_gallery_id)

    def test_gallery_bound_to_another_note_is_ignored(self) -> None:
        owner = Note.objects.create(title="Владелец")
        gallery = ImageGallery.objects.create()
        owner.bootsy_image_gallery = gallery
        owner.save()

        form = NoteForm(
            data={"title": "Чужая", "body": "", "bootsy_image_gallery_id": str(gallery.pk)}
        )
        self.assertTrue(form.is_valid(), form.errors)
        note = form.save()

        self.assertIsNone(note.bootsy_image_gallery_id)

    def test_existing_note_keeps_its_gallery(self) -> None:
        note = Note.objects.create(title="Есть галерея")
        form = NoteForm(instance=note)

        str(form["body"])
        note.refresh_from_db()
        gallery_id = note.bootsy_image_gallery_id

        form = NoteForm(
            data={"title": "Есть галерея", "body": "x", "bootsy_image_gallery_id": "999"},
            instance=note,
        )
        self.assertTrue(form.is_valid(), form.errors)
        form.save()

        note.refresh_from_db()
        self.assertEqual(note.bootsy_image_gallery_id, gallery_id)
        self.assertEqual(ImageGallery.objects.count(), 1)
