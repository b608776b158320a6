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

"""Tests for linetmpl.renderer."""

from __future__ import annotations

import logging

from linetmpl.models import ExpressionData, RenderSettings
from linetmpl.renderer import render, render_line


def _expr(head="Hi ", variable="name", tail=" world"):
    return ExpressionData(head=head, variable=variable, tail=tail)


class TestRender:
    def test_substitutes_value(self):
        assert render(_expr(), {"name": "Bob"}) == "Hi Bob world"

    def test_missing_variable_is_omitted(self):
        assert render(_expr(), {}) == "Hi  world"

    def test_absent_head_and_tail(self):
        expr = ExpressionData(head=None, variable="name", tail=None)
        assert render(expr, {"name": "Bob"}) == "Bob"

    def test_empty_value(self):
        assert render(_expr(), {"name": ""}) == "Hi  world"

    def test_context_not_modified(self):
        context = {"name": "Bob"}
        render(_expr(), context)
        assert context == {"name": "Bob"}

    def test_missing_variable_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="linetmpl.renderer")
        render(_expr(), {})
        assert "not in context" in caplog.text

    def test_missing_variable_log_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG, logger="linetmpl.renderer")
        render(_expr(), {}, RenderSettings(log_missing_variables=False))
        assert "not in context" not in caplog.text


class TestRenderLine:
    def test_literal_passes_through(self):
        assert render_line("<p>static</p>", {"name": "Bob"}) == "<p>static</p>"

    def test_variable_line(self):
        assert render_line("Hi {{name}} world", {"name": "Bob"}) == "Hi Bob world"

    def test_tag_dropped_by_default(self):
        assert render_line("{% for x in xs %}", {}) is None

    def test_tag_kept_when_configured(self):
        settings = RenderSettings(keep_tag_lines=True)
        assert render_line("{% endif %}", {}, settings) == "{% endif %}"

    def test_unrecognized_kept_by_default(self):
        assert render_line("{% block %}", {}) == "{% block %}"

    def test_unrecognized_dropped_when_configured(self):
        settings = RenderSettings(keep_unrecognized_lines=False)
        assert render_line("{% block %}", {}, settings) is None
