"""
Tests for template literals.
"""

import pytest

from graphql_helper import TemplateError, TemplateLiteral


class FakeTString:
    """Stands in for a PEP 750 Template: exposes strings and values."""

    def __init__(self, strings, values):
        self.strings = strings
        self.values = values


class TestTemplateLiteral:
    """Test TemplateLiteral construction and rendering."""

    def test_from_chunks_splits_text_and_values(self):
        """String chunks are text, everything else is a value."""
        marker = object()
        template = TemplateLiteral.from_chunks(["{ a ", marker, " b }"])

        assert template.strings == ("{ a ", " b }")
        assert template.values == (marker,)

    def test_from_chunks_joins_adjacent_text(self):
        template = TemplateLiteral.from_chunks(["{ ", "id", " }"])

        assert template.strings == ("{ id }",)
        assert template.values == ()

    def test_from_chunks_adjacent_values(self):
        """Adjacent values get an empty string between them."""
        template = TemplateLiteral.from_chunks([1, 2])

        assert template.strings == ("", "", "")
        assert template.values == (1, 2)

    def test_coerce_accepts_template_like_object(self):
        t = FakeTString(("{ x(id: ", ") }"), (5,))

        template = TemplateLiteral.coerce((t,))

        assert template.strings == ("{ x(id: ", ") }")
        assert template.values == (5,)

    def test_coerce_passes_template_literal_through(self):
        template = TemplateLiteral(("{ id }",))

        assert TemplateLiteral.coerce((template,)) is template

    def test_coerce_single_string(self):
        assert TemplateLiteral.coerce(("{ id }",)).strings == ("{ id }",)

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(TemplateError):
            TemplateLiteral(("a", "b"), ())

    def test_template_error_is_value_error(self):
        with pytest.raises(ValueError):
            TemplateLiteral((), ())

    def test_render(self):
        template = TemplateLiteral.from_chunks(["{ user(id: ", 7, ") { ", "name", " } }"])

        assert template.render(lambda value: f"<{value}>") == "{ user(id: <7>) { name } }"
