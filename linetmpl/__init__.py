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

"""Minimal line-oriented template engine core.

Classifies template lines as literal text, ``{{variable}}``
interpolations or ``{% for %}``/``{% if %}`` tags, and renders
single-placeholder lines against a context.

Usage::

    from linetmpl import classify, render

    content = classify("Hi {{name}} world")
    if content.is_template_variable:
        text = render(content.expression, {"name": "Bob"})  # "Hi Bob world"
"""

from linetmpl.classifier import classify, classify_lines, split_lines
from linetmpl.engine import TemplateEngine, TemplateSummary, render_template
from linetmpl.extractor import (
    MissingDelimiterError,
    OutOfRangeSliceError,
    TemplateSyntaxError,
    extract,
)
from linetmpl.models import (
    ContentKind,
    ContentType,
    Context,
    ExpressionData,
    RenderSettings,
    TagType,
)
from linetmpl.renderer import render, render_line
from linetmpl.symbols import contains_pair, contains_symbol, find_symbol, locate_symbol

__all__ = [
    "ContentKind",
    "ContentType",
    "Context",
    "ExpressionData",
    "MissingDelimiterError",
    "OutOfRangeSliceError",
    "RenderSettings",
    "TagType",
    "TemplateEngine",
    "TemplateSummary",
    "TemplateSyntaxError",
    "classify",
    "classify_lines",
    "contains_pair",
    "contains_symbol",
    "extract",
    "find_symbol",
    "locate_symbol",
    "render",
    "render_line",
    "render_template",
    "split_lines",
]
