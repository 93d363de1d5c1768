"""Tests for document display functionality."""

from __future__ import annotations

import json
from io import StringIO

from rich.console import Console

from mbapi.ui.cli.display.document import DocumentDisplay


def _display() -> tuple[DocumentDisplay, StringIO]:
    buffer = StringIO()
    return DocumentDisplay(Console(file=buffer, width=120, color_system=None)), buffer


def test_show_document_prints_json() -> None:
    display, buffer = _display()

    display.show_document({"id": "x", "name": "Björk"})

    assert json.loads(buffer.getvalue()) == {"id": "x", "name": "Björk"}


def test_show_document_quiet() -> None:
    display, buffer = _display()

    display.show_document({"id": "x"}, quiet=True)

    assert buffer.getvalue() == ""


def test_show_includes_sorted() -> None:
    display, buffer = _display()

    display.show_includes("artist", {"tags", "aliases"})

    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Includes for artist (2):"
    assert lines[1:] == ["  • aliases", "  • tags"]
