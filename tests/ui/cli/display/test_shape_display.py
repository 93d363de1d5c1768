"""Tests for shape tree rendering."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from mbapi.features.schema import (
    DEFAULT_REGISTRY,
    NEVER,
    NULL,
    STRING,
    ArrayOf,
    Nullable,
    OneOf,
    Ref,
    ValueType,
    describe_shape,
)
from mbapi.ui.cli.display.shape import ShapeDisplay, format_type


@pytest.mark.parametrize(
    ("value_type", "label"),
    [
        (STRING, "string"),
        (Ref("alias"), "alias"),
        (ArrayOf(Ref("artist-credit")), "artist-credit[]"),
        (Nullable(Ref("minimal-area")), "minimal-area | null"),
        (OneOf((ArrayOf(Ref("artist-credit")), NULL)), "artist-credit[] | null"),
        (ArrayOf(OneOf((Ref("a"), Ref("b")))), "(a | b)[]"),
        (ArrayOf(NEVER), "never[]"),
    ],
)
def test_format_type(value_type: ValueType, label: str) -> None:
    assert format_type(value_type) == label


def _render(depth: int, includes: list[str]) -> str:
    buffer = StringIO()
    display = ShapeDisplay(Console(file=buffer, width=200, color_system=None))
    display.show_shape(describe_shape("artist", includes, registry=DEFAULT_REGISTRY), depth)
    return buffer.getvalue()


def test_show_shape_marks_conditional_fields() -> None:
    output = _render(1, ["aliases"])

    assert "artist (aliases)" in output
    assert "+ aliases?: alias[]" in output
    assert "• id: string" in output
    assert "sort-name" in output


def test_depth_limits_nested_expansion() -> None:
    shallow = _render(1, ["aliases"])
    deep = _render(2, ["aliases"])

    assert "locale" not in shallow
    assert "locale" in deep
