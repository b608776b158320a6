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

"""Substitute a context value into an extracted expression."""

from __future__ import annotations

import logging

from linetmpl.classifier import classify
from linetmpl.models import ContentKind, Context, ExpressionData, RenderSettings

logger = logging.getLogger(__name__)


def render(
    expression: ExpressionData,
    context: Context,
    settings: RenderSettings | None = None,
) -> str:
    """Render *expression* with the value of its variable from *context*.

    A variable missing from *context* renders as nothing; it is not an
    error.
    """
    logger.debug("Rendering expression %r", expression)
    parts: list[str] = []
    if expression.head is not None:
        parts.append(expression.head)

    value = context.get(expression.variable)
    if value is not None:
        parts.append(value)
    elif settings is None or settings.log_missing_variables:
        logger.debug("Variable %r not in context, omitted", expression.variable)

    if expression.tail is not None:
        parts.append(expression.tail)
    return "".join(parts)


def render_line(
    line: str,
    context: Context,
    settings: RenderSettings | None = None,
) -> str | None:
    """Classify and render one line.

    Returns ``None`` when the line is dropped from the output: tag lines
    unless ``settings.keep_tag_lines``, and unrecognized lines when
    ``settings.keep_unrecognized_lines`` is off.
    """
    settings = settings or RenderSettings()
    content = classify(line)

    if content.kind is ContentKind.LITERAL:
        return content.text
    if content.kind is ContentKind.TEMPLATE_VARIABLE:
        return render(content.expression, context, settings)
    if content.kind is ContentKind.TAG:
        # Tags are detected only, never executed
        return line if settings.keep_tag_lines else None
    return line if settings.keep_unrecognized_lines else None
