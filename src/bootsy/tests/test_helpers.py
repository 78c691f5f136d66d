"""Тесты построения разметки редактора."""

from __future__ import annotations

import re
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase, override_settings

from bootsy.counter import RenderCounter
from bootsy.helpers import bootsy_editor, editor_configuration, enable_uploader, field_name
from bootsy.models import ImageGallery
from notes.models import Comment, Note


def hidden_count(html: str) -> int:
    return html.count('type="hidden"')


class EnableUploaderTests(TestCase):
    def setUp(self) -> None:
        self.note = Note(title="Черновик")
        self.comment = Comment(body="Текст")

    def test_explicit_false_disables_uploader(self) -> None:
        self.assertFalse(enable_uploader({"uploader": False, "container": self.note}))
        self.assertFalse(enable_uploader({"uploader": False, "object": self.note}))

    def test_container_option_enables_uploader(self) -> None:
        self.assertTrue(enable_uploader({"container": self.note, "object": self.comment}))

    def test_bound_object_is_fallback_container(self) -> None:
        self.assertTrue(enable_uploader({"object": self.note}))
        self.assertTrue(enable_uploader({"container": None, "object": self.note}))

    def test_non_container_object_disables_uploader(self) -> None:
        self.assertFalse(enable_uploader({"object": self.comment}))
        self.assertFalse(enable_uploader({}))

    def test_invalid_container_does_not_fall_back_to_object(self) -> None:
        self.assertFalse(enable_uploader({"container": "gallery", "object": self.note}))

    def test_blank_container_values_fall_back_to_object(self) -> None:
        for blank in ("", "   ", [], {}, None):
            with self.subTest(container=blank):
                self.assertTrue(enable_uploader({"container": blank, "object": self.note}))


class BootsyEditorTests(TestCase):
    def setUp(self) -> None:
        self.counter = RenderCounter()

    def test_new_container_renders_gallery_field(self) -> None:
        container = Note(title="Новая")

        html = bootsy_editor(
            "post",
            "body",
            {"container": container, "editor_options": {"uploader": True}},
            counter=self.counter,
        )

        gallery = ImageGallery.objects.get()
        self.assertEqual(container.bootsy_image_gallery_id, gallery.pk)
        self.assertInHTML(
            f'<trix-editor input="trix-editor-1" data-bootsy-gallery_id="{gallery.pk}" '
            'data-bootsy-uploader="true"></trix-editor>',
            html,
        )
        self.assertInHTML('<input type="hidden" name="post[body]" id="trix-editor-1">', html)
        self.assertInHTML(
            f'<input type="hidden" name="post[bootsy_image_gallery_id]" value="{gallery.pk}" '
            'class="bootsy_image_gallery_id" id="post_bootsy_image_gallery_id">',
            html,
        )
        self.assertEqual(hidden_count(html), 2)

    def test_persisted_container_renders_single_hidden_field(self) -> None:
        note = Note.objects.create(title="Сохранённая")

        html = bootsy_editor("note", "body", object=note, counter=self.counter)

        self.assertEqual(hidden_count(html), 1)
        self.assertNotIn("bootsy_image_gallery_id", html)
        note.refresh_from_db()
        self.assertIsNotNone(note.bootsy_image_gallery_id)
        self.assertIn(f'data-bootsy-gallery_id="{note.bootsy_image_gallery_id}"', html)

    def test_gallery_is_created_once_per_container(self) -> None:
        note = Note.objects.create(title="Повтор")

        bootsy_editor("note", "body", object=note, counter=self.counter)
        bootsy_editor("note", "body", object=note, counter=self.counter)
        bootsy_editor("note", "body", container=note, counter=self.counter)

        self.assertEqual(ImageGallery.objects.count(), 1)
        gallery = ImageGallery.objects.get()
        self.assertEqual(gallery.bound_to, note)

    def test_existing_gallery_is_reused(self) -> None:
        gallery = ImageGallery.objects.create()
        note = Note(title="С галереей", bootsy_image_gallery=gallery)

        html = bootsy_editor("note", "body", object=note, counter=self.counter)

        self.assertEqual(ImageGallery.objects.count(), 1)
        self.assertIn(f'data-bootsy-gallery_id="{gallery.pk}"', html)

    def test_uploader_false_omits_gallery_markup(self) -> None:
        container = Note(title="Без загрузки")

        html = bootsy_editor(
            "post", "body", {"container": container, "uploader": False}, counter=self.counter
        )

        self.assertFalse(ImageGallery.objects.exists())
        self.assertIsNone(container.bootsy_image_gallery_id)
        self.assertNotIn("gallery_id", html)
        self.assertIn('data-bootsy-uploader="false"', html)
        self.assertEqual(hidden_count(html), 1)

    def test_non_container_object_renders_without_uploader(self) -> None:
        comment = Comment(body="<b>Привет</b>")

        html = bootsy_editor("comment", "body", object=comment, id="comment-body")

        self.assertFalse(ImageGallery.objects.exists())
        self.assertInHTML(
            '<input type="hidden" name="comment[body]" id="comment-body" '
            'value="&lt;b&gt;Привет&lt;/b&gt;">',
            html,
        )
        self.assertIn('data-bootsy-uploader="false"', html)

    def test_whitespace_container_uses_bound_object(self) -> None:
        note = Note(title="Пробелы")

        html = bootsy_editor("note", "body", container="  ", object=note, counter=self.counter)

        self.assertEqual(ImageGallery.objects.get().pk, note.bootsy_image_gallery_id)
        self.assertIn('name="note[bootsy_image_gallery_id]"', html)

    def test_invalid_container_silently_disables_uploader(self) -> None:
        note = Note(title="Объект")

        html = bootsy_editor("note", "body", container="not-a-model", object=note)

        self.assertFalse(ImageGallery.objects.exists())
        self.assertNotIn("gallery_id", html)

    @override_settings(BOOTSY={"EDITOR_OPTIONS": {"foo": False, "bar": True}})
    def test_editor_options_are_merged_with_defaults(self) -> None:
        html = bootsy_editor(
            "post", "body", {"editor_options": {"foo": True}}, counter=self.counter
        )

        self.assertIn('data-bootsy-foo="true"', html)
        self.assertIn('data-bootsy-bar="true"', html)
        self.assertIn('data-bootsy-uploader="false"', html)

    def test_pass_through_attributes_and_data(self) -> None:
        html = bootsy_editor(
            "post",
            "body",
            {
                "class": "form-control",
                "placeholder": "Текст",
                "autofocus": True,
                "style": "color: red",
                "data": {"controller": "editor"},
            },
            counter=self.counter,
        )

        self.assertInHTML(
            '<trix-editor class="form-control" placeholder="Текст" autofocus '
            'input="trix-editor-1" data-controller="editor" '
            'data-bootsy-uploader="false"></trix-editor>',
            html,
        )
        self.assertNotIn("color: red", html)

    def test_explicit_id_skips_counter(self) -> None:
        html = bootsy_editor("post", "body", id="post-body", counter=self.counter)

        self.assertIn('input="post-body"', html)
        self.assertInHTML('<input type="hidden" name="post[body]" id="post-body">', html)
        self.assertEqual(self.counter.value, 0)

    def test_generated_ids_are_unique_and_increasing(self) -> None:
        pattern = re.compile(r'input="trix-editor-(\d+)"')
        numbers = [
            int(pattern.search(bootsy_editor("post", "body")).group(1)) for _ in range(3)
        ]

        self.assertEqual(numbers, sorted(set(numbers)))
        self.assertEqual(numbers[2] - numbers[0], 2)

    def test_caller_options_are_not_mutated(self) -> None:
        container = Note(title="Опции")
        options = {"container": container, "data": {"controller": "editor"}}

        bootsy_editor("post", "body", options, counter=self.counter)

        self.assertEqual(options["data"], {"controller": "editor"})

    def test_persistence_failure_propagates(self) -> None:
        container = Note(title="Ошибка")

        with patch("bootsy.services.ImageGallery") as gallery_model:
            gallery_model.objects.create.side_effect = DatabaseError("boom")
            with self.assertRaises(DatabaseError):
                bootsy_editor("post", "body", container=container)


class EditorConfigurationTests(TestCase):
    def test_defaults_include_uploader_flag(self) -> None:
        configuration = editor_configuration({"object": Note(title="x")})

        self.assertEqual(configuration, {"uploader": True})

    def test_field_name_without_object_name(self) -> None:
        self.assertEqual(field_name(None, "body"), "body")
        self.assertEqual(field_name("post", "body"), "post[body]")


class EditorLoggingTests(TestCase):
    def test_render_events_carry_gallery_id(self) -> None:
        note = Note.objects.create(title="Лог")

        with self.assertLogs("bootsy.helpers", level="DEBUG") as logs:
            bootsy_editor("note", "body", object=note, counter=RenderCounter())

        note.refresh_from_db()
        payload = logs.records[0].event_payload
        self.assertEqual(payload["event"], "editor_rendered")
        self.assertEqual(payload["gallery_id"], note.bootsy_image_gallery_id)

    def test_render_without_uploader_has_no_gallery_id(self) -> None:
        with self.assertLogs("bootsy.helpers", level="DEBUG") as logs:
            bootsy_editor("comment", "body", object=Comment(body=""), id="c")

        self.assertNotIn("gallery_id", logs.records[0].event_payload)

    def test_gallery_bound_on_render_is_logged_with_gallery_id(self) -> None:
        note = Note.objects.create(title="Привязка")

        with self.assertLogs("bootsy.galleries", level="INFO") as logs:
            bootsy_editor("note", "body", object=note, counter=RenderCounter())

        bound = [r.event_payload for r in logs.records if r.event_payload["event"] == "gallery_bound"]
        self.assertEqual(len(bound), 1)
        note.refresh_from_db()
        self.assertEqual(bound[0]["gallery_id"], note.bootsy_image_gallery_id)
