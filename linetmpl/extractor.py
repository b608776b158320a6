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

"""Split a placeholder line into head, variable and tail.

The split points are the first ``{`` that opens a ``{{`` and the first
``}`` after it that opens a ``}}``.  Stray single braces and ``{%``
tag braces before the placeholder are skipped.  A line with no genuine
pair raises a :class:`TemplateSyntaxError` subclass instead of slicing
blindly.
"""

from __future__ import annotations

import logging

from linetmpl.models import ExpressionData
from linetmpl.symbols import VARIABLE_CLOSE, VARIABLE_OPEN, locate_symbol

logger = logging.getLogger(__name__)


class TemplateSyntaxError(ValueError):
    """A line does not have the shape its classification requires."""

    def __init__(self, message: str, line: str) -> None:
        self.line = line
        super().__init__(f"{message}: {line!r}")


class MissingDelimiterError(TemplateSyntaxError):
    """No genuine opening ``{{`` or closing ``}}`` in the line."""


class OutOfRangeSliceError(TemplateSyntaxError):
    """A ``}}`` exists, but only before the opening ``{{``."""


def _locate_delimiter(line: str, delimiter: str, start: int = 0) -> int | None:
    """Offset of the first *delimiter* at or after *start*, or ``None``.

    Walks the occurrences of the delimiter's first character with
    :func:`locate_symbol`, skipping those not followed by the rest.
    """
    while True:
        offset = locate_symbol(line[start:], delimiter[0])
        if offset is None:
            return None
        index = start + offset
        if line.startswith(delimiter, index):
            return index
        start = index + 1


def extract(line: str) -> ExpressionData:
    """Split *line* around its ``{{variable}}`` placeholder.

    ``head`` and ``tail`` are always populated, possibly with empty
    strings.

    Raises:
        MissingDelimiterError: If the line has no ``{{``, or no ``}}``
            anywhere.
        OutOfRangeSliceError: If every ``}}`` comes before the ``{{``.
    """
    opening = _locate_delimiter(line, VARIABLE_OPEN)
    if opening is None:
        raise MissingDelimiterError("No opening '{{' delimiter", line)

    name_start = opening + len(VARIABLE_OPEN)
    closing = _locate_delimiter(line, VARIABLE_CLOSE, name_start)
    if closing is None:
        if _locate_delimiter(line, VARIABLE_CLOSE) is not None:
            raise OutOfRangeSliceError("Closing '}}' precedes opening '{{'", line)
        raise MissingDelimiterError("No closing '}}' delimiter", line)

    expression = ExpressionData(
        head=line[:opening],
        variable=line[name_start:closing],
        tail=line[closing + len(VARIABLE_CLOSE):],
    )
    logger.debug("Extracted %r from %r", expression, line)
    return expression
