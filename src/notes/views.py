"""Представления демонстрационного приложения notes."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.template.response import TemplateResponse
from django.urls import reverse
from django.views.generic import CreateView, UpdateView

from notes.forms import NoteForm
from notes.models import Comment, Note


class NoteCreateView(CreateView):
    """Форма новой заметки: галерея передаётся через скрытое поле."""

    model = Note
    form_class = NoteForm
    template_name = "notes/note_form.html"

    def get_success_url(self) -> str:
        return reverse("notes:update", args=[self.object.pk])


class NoteUpdateView(UpdateView):
    model = Note
    form_class = NoteForm
    template_name = "notes/note_form.html"

    def get_success_url(self) -> str:
        return reverse("notes:update", args=[self.object.pk])


def comment_create(request: HttpRequest, pk: int) -> HttpResponse:
    """Комментарий к заметке; поле формы называется `comment[body]`."""

    note = get_object_or_404(Note, pk=pk)
    comment = Comment(note=note)
    if request.method == "POST":
        comment.body = request.POST.get("comment[body]", "")
        comment.save()
        return redirect("notes:update", pk=note.pk)
    return TemplateResponse(
        request,
        "notes/comment_form.html",
        {"note": note, "comment": comment},
    )
