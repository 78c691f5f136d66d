"""Счётчик для генерации уникальных идентификаторов редакторов."""

from __future__ import annotations

import threading

from bootsy.constants import ELEMENT_ID_PREFIX


class RenderCounter:
    """Потокобезопасный монотонный счётчик."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def next(self) -> int:
        """Атомарно увеличивает счётчик и возвращает новое значение."""

        with self._lock:
            self._value += 1
            return self._value


default_counter = RenderCounter()


def next_element_id(
    counter: RenderCounter | None = None, *, prefix: str = ELEMENT_ID_PREFIX
) -> str:
    return f"{prefix}{(counter or default_counter).next()}"
