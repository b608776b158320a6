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

"""Line-by-line template driver.

Feeds template source through the classifier one line at a time and
joins the rendered fragments.  Each line holds at most one placeholder;
``{% for %}`` and ``{% if %}`` lines are recognised but not executed::

    engine = TemplateEngine()
    engine.render("<h1>{{title}}</h1>\\n<p>static</p>", {"title": "Hi"})
    # -> "<h1>Hi</h1>\\n<p>static</p>"

The engine works on strings only.  Reading template files and writing
output is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from linetmpl.classifier import classify, split_lines
from linetmpl.models import (
    ContentKind,
    ContentType,
    Context,
    RenderSettings,
    TagType,
)
from linetmpl.renderer import render_line

logger = logging.getLogger(__name__)


@dataclass
class TemplateSummary:
    """Per-kind line counts plus the variables and tags a template uses.

    ``variables`` and ``tags`` each list an entry once, in first-seen
    order.
    """
    total_lines: int = 0
    counts: dict[ContentKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in ContentKind}
    )
    variables: list[str] = field(default_factory=list)
    tags: list[TagType] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-safe dictionary."""
        return {
            "total_lines": self.total_lines,
            "counts": {kind.value: n for kind, n in self.counts.items()},
            "variables": list(self.variables),
            "tags": [tag.value for tag in self.tags],
        }


class TemplateEngine:
    """Classify and render template source line by line.

    Args:
        settings: Rendering options; defaults to :class:`RenderSettings`.
    """

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self.settings = settings or RenderSettings()

    def classify(self, line: str) -> ContentType:
        return classify(line)

    def render_line(self, line: str, context: Context) -> str | None:
        """Render one line, or ``None`` if the line is dropped."""
        return render_line(line, context, self.settings)

    def render(self, source: str, context: Context) -> str:
        """Render a multi-line template string with *context*.

        Each kept line keeps its original ending (``\\n``, ``\\r\\n`` or
        none), unless ``settings.line_separator`` replaces it.  A dropped
        line takes its ending with it.
        """
        separator = self.settings.line_separator
        rendered = []
        for number, (line, ending) in enumerate(split_lines(source), start=1):
            fragment = self.render_line(line, context)
            if fragment is None:
                logger.debug("Line %d dropped from output", number)
                continue
            if ending and separator is not None:
                ending = separator
            rendered.append(fragment + ending)
        return "".join(rendered)

    def analyze(self, source: str) -> TemplateSummary:
        """Summarise how each line of *source* classifies.

        Variable names and tag types are listed once each, in first-seen
        order.
        """
        summary = TemplateSummary()
        for line, _ in split_lines(source):
            content = classify(line)
            summary.total_lines += 1
            summary.counts[content.kind] += 1
            if content.is_template_variable:
                name = content.expression.variable
                if name not in summary.variables:
                    summary.variables.append(name)
            elif content.is_tag and content.tag_type not in summary.tags:
                summary.tags.append(content.tag_type)
        return summary


def render_template(
    source: str,
    context: Context,
    settings: RenderSettings | None = None,
) -> str:
    """Render *source* with a throwaway :class:`TemplateEngine`."""
    return TemplateEngine(settings).render(source, context)
