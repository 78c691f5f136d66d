"""Структурированное логирование событий Bootsy."""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final
from uuid import uuid4

LOG_CONTEXT: ContextVar[dict[str, Any]] = ContextVar("bootsy_log_context", default={})
CONTEXT_FIELDS: Final = ("correlation_id", "user_id", "gallery_id")


def generate_correlation_id() -> str:
    return uuid4().hex


def current_context() -> dict[str, Any]:
    """Возвращает копию текущего контекста логирования."""

    return dict(LOG_CONTEXT.get())


@contextmanager
def logging_context(**values: Any) -> Iterator[None]:
    """Временно добавляет значения в контекст логирования."""

    token = LOG_CONTEXT.set(
        {**current_context(), **{k: v for k, v in values.items() if v is not None}}
    )
    try:
        yield
    finally:
        LOG_CONTEXT.reset(token)


class ContextInjector(logging.Filter):
    """Переносит поля контекста в атрибуты записи лога."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - стандартное API logging
        context = current_context()
        for key in CONTEXT_FIELDS:
            if context.get(key) is not None:
                setattr(record, key, context[key])
        return True


class StructuredFormatter(logging.Formatter):
    """Сериализует записи в одну строку JSON."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - стандартное API logging
        event = getattr(record, "event_payload", None)
        payload: dict[str, Any] = (
            dict(event) if isinstance(event, dict) else {"message": record.getMessage()}
        )
        payload.setdefault("level", record.levelname)
        payload.setdefault("logger", record.name)
        if record.exc_info:
            payload.setdefault(
                "exception",
                "".join(traceback.format_exception(*record.exc_info)).strip(),
            )
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload.setdefault(key, value)
        return json.dumps(payload, ensure_ascii=False, default=str)


class EventLogger:
    """Пишет именованные события с произвольными полями."""

    def __init__(self, *, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, fields)

    def _log(self, level: int, event: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload = {k: v for k, v in current_context().items() if v is not None}
        payload.update({k: v for k, v in fields.items() if v is not None})
        payload["event"] = event
        self._logger.log(level, event, extra={"event_payload": payload})


def event_logger(name: str) -> EventLogger:
    return EventLogger(logger=logging.getLogger(name))
