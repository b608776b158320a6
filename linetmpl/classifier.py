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

"""Assign each template line to exactly one :class:`ContentType`.

Detection is substring-based, not a grammar.  The checks overlap, and
the order below resolves the overlap:

1. tag delimiters + ``for``/``in`` or ``endfor``  -> ``FOR_TAG``
2. tag delimiters + ``if`` or ``endif``            -> ``IF_TAG``
3. variable delimiters                             -> template variable
4. neither delimiter pair                          -> literal
5. anything else                                   -> unrecognized

A line holding both keywords is therefore a ``FOR_TAG``, and a tag line
without a keyword that also holds ``{{``/``}}`` is a template variable.
"""

from __future__ import annotations

import logging

from linetmpl.extractor import TemplateSyntaxError, extract
from linetmpl.models import ContentType, TagType
from linetmpl.symbols import (
    TAG_CLOSE,
    TAG_OPEN,
    VARIABLE_CLOSE,
    VARIABLE_OPEN,
    contains_pair,
    contains_symbol,
)

logger = logging.getLogger(__name__)


def classify(line: str) -> ContentType:
    """Classify a single line of template source."""
    is_tag = contains_pair(line, TAG_OPEN, TAG_CLOSE)
    is_for = (
        contains_symbol(line, "for") and contains_symbol(line, "in")
    ) or contains_symbol(line, "endfor")
    is_if = contains_symbol(line, "if") or contains_symbol(line, "endif")
    is_var = contains_pair(line, VARIABLE_OPEN, VARIABLE_CLOSE)

    if is_tag and is_for:
        return ContentType.tag(TagType.FOR_TAG)
    if is_tag and is_if:
        return ContentType.tag(TagType.IF_TAG)
    if is_var:
        try:
            return ContentType.template_variable(extract(line))
        except TemplateSyntaxError as e:
            # Both delimiters occur, but not as a well-formed {{name}}
            logger.debug("Malformed placeholder, unrecognized: %s", e)
            return ContentType.unrecognized()
    if not is_tag:
        return ContentType.literal(line)
    return ContentType.unrecognized()


def split_lines(text: str) -> list[tuple[str, str]]:
    """Split *text* into ``(line, ending)`` pairs.

    Only ``\\n`` and ``\\r\\n`` end a line, so other characters that
    :meth:`str.splitlines` treats as boundaries stay inside the line.
    ``ending`` is ``""`` for a final line without a newline; a trailing
    newline does not produce an extra empty line.
    """
    lines = []
    segments = text.split("\n")
    for segment in segments[:-1]:
        if segment.endswith("\r"):
            lines.append((segment[:-1], "\r\n"))
        else:
            lines.append((segment, "\n"))
    if segments[-1]:
        lines.append((segments[-1], ""))
    return lines


def classify_lines(text: str) -> list[ContentType]:
    """Classify every line of a multi-line template string."""
    return [classify(line) for line, _ in split_lines(text)]
