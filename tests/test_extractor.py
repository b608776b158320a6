# linetmpl — line-oriented template classification and rendering
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Tests for linetmpl.extractor."""

from __future__ import annotations

import pytest

from linetmpl.extractor import (
    MissingDelimiterError,
    OutOfRangeSliceError,
    TemplateSyntaxError,
    extract,
)
from linetmpl.models import ExpressionData


class TestExtract:
    def test_head_variable_tail(self):
        assert extract("Hi {{name}} world") == ExpressionData(
            head="Hi ", variable="name", tail=" world",
        )

    def test_placeholder_only(self):
        expr = extract("{{name}}")
        assert expr.head == ""
        assert expr.variable == "name"
        assert expr.tail == ""

    def test_head_and_tail_always_present(self):
        expr = extract("{{x}}")
        assert expr.head is not None
        assert expr.tail is not None

    def test_skips_tag_braces_before_placeholder(self):
        assert extract("{% block %} {{name}}") == ExpressionData(
            head="{% block %} ", variable="name", tail="",
        )

    def test_skips_single_braces_before_placeholder(self):
        assert extract("Price {x} is {{price}}") == ExpressionData(
            head="Price {x} is ", variable="price", tail="",
        )

    def test_skips_single_closing_brace_inside_tail(self):
        expr = extract("{{a}} then } and }}")
        assert expr.variable == "a"
        assert expr.tail == " then } and }}"

    def test_closing_searched_after_opening(self):
        expr = extract("}} {{name}}")
        assert expr == ExpressionData(head="}} ", variable="name", tail="")

    def test_whitespace_inside_braces_is_kept(self):
        assert extract("a {{ name }} b").variable == " name "

    def test_multibyte_text(self):
        expr = extract("¡Hola {{nombre}}!")
        assert expr == ExpressionData(head="¡Hola ", variable="nombre", tail="!")

    @pytest.mark.parametrize(
        "head, variable, tail",
        [
            ("<p> Hello ", "name", ", welcome </p>"),
            ("", "title", ""),
            ("Total: ", "amount", " EUR"),
            ("  ", "indented", "  "),
        ],
    )
    def test_recovers_parts(self, head, variable, tail):
        line = head + "{{" + variable + "}}" + tail
        expr = extract(line)
        assert (expr.head, expr.variable, expr.tail) == (head, variable, tail)
        assert expr.reconstruct() == line


class TestExtractErrors:
    def test_no_opening_brace(self):
        with pytest.raises(MissingDelimiterError, match="opening"):
            extract("name}} here")

    def test_single_opening_brace(self):
        with pytest.raises(MissingDelimiterError, match="opening"):
            extract("{name}} here")

    def test_no_closing_brace(self):
        with pytest.raises(MissingDelimiterError, match="closing"):
            extract("{{name here")

    def test_single_closing_brace(self):
        with pytest.raises(MissingDelimiterError, match="closing"):
            extract("{{name} here")

    def test_only_closing_before_opening(self):
        with pytest.raises(OutOfRangeSliceError):
            extract("a }} b {{c")

    def test_inverted_delimiters(self):
        with pytest.raises(OutOfRangeSliceError):
            extract("}} and {{")

    def test_errors_share_base_and_keep_line(self):
        with pytest.raises(TemplateSyntaxError) as exc_info:
            extract("{{oops")
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.line == "{{oops"
