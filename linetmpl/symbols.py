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

"""Symbol location and substring matching helpers."""

from __future__ import annotations

VARIABLE_OPEN = "{{"
VARIABLE_CLOSE = "}}"
TAG_OPEN = "{%"
TAG_CLOSE = "%}"


def _check_symbol(symbol: str) -> None:
    if len(symbol) != 1:
        raise ValueError(f"Expected a single character, got {symbol!r}")


def locate_symbol(text: str, symbol: str) -> int | None:
    """Return the offset of the first *symbol* in *text*, or ``None``.

    Offsets count characters, not encoded bytes, so the result is always
    a valid slice point for *text*.
    """
    _check_symbol(symbol)
    for index, char in enumerate(text):
        if char == symbol:
            return index
    return None


def find_symbol(text: str, symbol: str) -> tuple[bool, int]:
    """Return ``(found, offset)`` for the first *symbol* in *text*.

    When *symbol* does not occur the result is ``(False, 0)``; the offset
    is meaningless in that case.  Prefer :func:`locate_symbol` when the
    offset is going to be used for slicing.
    """
    index = locate_symbol(text, symbol)
    if index is None:
        return False, 0
    return True, index


def contains_symbol(text: str, symbol: str) -> bool:
    """True if *symbol* occurs anywhere in *text*."""
    return symbol in text


def contains_pair(text: str, symbol1: str, symbol2: str) -> bool:
    """True if both symbols occur in *text*, in any order or position."""
    return contains_symbol(text, symbol1) and contains_symbol(text, symbol2)
