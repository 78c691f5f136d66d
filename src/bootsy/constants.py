"""Константы приложения Bootsy."""

from __future__ import annotations

from typing import Final

DATA_PREFIX: Final = "bootsy-"
ELEMENT_ID_PREFIX: Final = "trix-editor-"
EDITOR_TAG: Final = "trix-editor"

GALLERY_ID_FIELD: Final = "bootsy_image_gallery_id"
GALLERY_ID_CLASS: Final = "bootsy_image_gallery_id"
GALLERY_DATA_KEY: Final = "gallery_id"

PASS_THROUGH_ATTRIBUTES: Final = ("class", "placeholder", "autofocus")

DEFAULT_EDITOR_OPTIONS: Final = {
    "uploader": True,
}

ORPHAN_GALLERY_DAYS: Final = 1
