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

"""Data models for template line classification.

Defines the tag and content-kind enums, the :class:`ExpressionData`
split of a placeholder line, and :class:`ContentType`, the tagged
result that :func:`~linetmpl.classifier.classify` produces for every
line.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Name -> value mapping supplied at render time (read only)
Context = Mapping[str, str]


class TagType(Enum):
    """Control construct a tag line represents."""
    FOR_TAG = "for"
    IF_TAG = "if"


class ContentKind(Enum):
    """Category assigned to a single template line."""
    LITERAL = "literal"
    TEMPLATE_VARIABLE = "template_variable"
    TAG = "tag"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ExpressionData:
    """A line split around one ``{{variable}}`` placeholder.

    If the template contains ``<p> Hello {{name}}, welcome </p>`` then
    head is ``"<p> Hello "``, variable is ``"name"`` and tail is
    ``", welcome </p>"``.

    Attributes:
        head: Literal text before the placeholder (``None`` if absent).
        variable: The name between the braces, delimiters excluded.
        tail: Literal text after the placeholder (``None`` if absent).
    """

    head: str | None
    variable: str
    tail: str | None

    def reconstruct(self) -> str:
        """Rebuild the source line, treating absent head/tail as empty."""
        return f"{self.head or ''}{{{{{self.variable}}}}}{self.tail or ''}"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-safe dictionary."""
        return {
            "head": self.head,
            "variable": self.variable,
            "tail": self.tail,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExpressionData:
        """Deserialise from a dictionary produced by :meth:`to_dict`."""
        return cls(
            head=data.get("head"),
            variable=data["variable"],
            tail=data.get("tail"),
        )


@dataclass(frozen=True)
class ContentType:
    """Classification of one template line.

    Exactly one payload field is populated, matching ``kind``.  Build
    instances through the classmethod constructors rather than directly.
    """

    kind: ContentKind
    text: str | None = None
    expression: ExpressionData | None = None
    tag_type: TagType | None = None

    def __post_init__(self) -> None:
        payloads = {
            ContentKind.LITERAL: "text",
            ContentKind.TEMPLATE_VARIABLE: "expression",
            ContentKind.TAG: "tag_type",
        }
        expected = payloads.get(self.kind)
        populated = [
            name for name in payloads.values() if getattr(self, name) is not None
        ]
        if populated != ([expected] if expected else []):
            raise ValueError(
                f"{self.kind.name} content must carry "
                f"{expected or 'no payload'}, got {populated or 'none'}"
            )

    @classmethod
    def literal(cls, text: str) -> ContentType:
        return cls(kind=ContentKind.LITERAL, text=text)

    @classmethod
    def template_variable(cls, expression: ExpressionData) -> ContentType:
        return cls(kind=ContentKind.TEMPLATE_VARIABLE, expression=expression)

    @classmethod
    def tag(cls, tag_type: TagType) -> ContentType:
        return cls(kind=ContentKind.TAG, tag_type=tag_type)

    @classmethod
    def unrecognized(cls) -> ContentType:
        return cls(kind=ContentKind.UNRECOGNIZED)

    @property
    def is_literal(self) -> bool:
        return self.kind is ContentKind.LITERAL

    @property
    def is_template_variable(self) -> bool:
        return self.kind is ContentKind.TEMPLATE_VARIABLE

    @property
    def is_tag(self) -> bool:
        return self.kind is ContentKind.TAG

    @property
    def is_unrecognized(self) -> bool:
        return self.kind is ContentKind.UNRECOGNIZED


@dataclass(frozen=True)
class RenderSettings:
    """User-configurable rendering behaviour.  Immutable once built."""
    keep_tag_lines: bool = False           # Echo tag lines (never executed)
    keep_unrecognized_lines: bool = True   # Echo lines that match no shape
    log_missing_variables: bool = True
    line_separator: str | None = None      # Replaces line endings; None keeps them
