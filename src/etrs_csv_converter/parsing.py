"""
ETRS CSV Converter — Coordinate Cell Parsing
=============================================
Turns the text of a coordinate cell into structured pairs.

Two encodings are understood::

    "[385000.5 6672000.25]"                     single pair
    "[[385000 6672000] [385010 6672010] ...]"   multi-pair list

Values inside a pair are separated by exactly one space.  Parsing is
split in two steps: the bracket structure is checked here and raises
:class:`~shared.python.exceptions.CoordinateParseError` when it is
wrong, while the numeric tokens are handed back as text and converted
with :func:`parse_number`, which reports failures through a
:class:`ParsedNumber` result instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shared.python.exceptions import CoordinateParseError

logger = logging.getLogger("geoscripthub.etrs_csv_converter.parsing")

MULTI_PAIR_PREFIX = "[["
MULTI_PAIR_SUFFIX = "]]"
PAIR_SEPARATOR = "] ["
VALUE_SEPARATOR = " "


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CoordinatePair:
    """One ``x y`` pair as it appeared in the cell, still unparsed.

    Attributes:
        x_text: Easting token.
        y_text: Northing token.
    """

    x_text: str
    y_text: str


@dataclass(frozen=True)
class ParsedNumber:
    """Outcome of converting one numeric token.

    Attributes:
        text: The token that was parsed.
        value: The float value, or ``0.0`` when parsing failed.
        ok: ``True`` if *text* was a valid float literal.
    """

    text: str
    value: float
    ok: bool


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def parse_number(text: str) -> ParsedNumber:
    """Parse *text* as a float without raising.

    Only plain ASCII literals are accepted: tokens with surrounding
    whitespace, digit-group underscores or non-ASCII digits fail, even
    though :func:`float` would take them.

    Example::

        >>> parse_number("12.5")
        ParsedNumber(text='12.5', value=12.5, ok=True)
        >>> parse_number("abc").value
        0.0
    """
    if text.isascii() and "_" not in text and text == text.strip():
        try:
            return ParsedNumber(text=text, value=float(text), ok=True)
        except ValueError:
            pass
    logger.debug("Could not parse %r as a number.", text)
    return ParsedNumber(text=text, value=0.0, ok=False)


def is_multi_pair(value: str) -> bool:
    """Return ``True`` when *value* uses the doubled-bracket list form."""
    return value.startswith(MULTI_PAIR_PREFIX)


def parse_single_pair(value: str) -> CoordinatePair:
    """Parse a ``"[x y]"`` cell.

    The first and last characters are removed and the remainder is split
    on single spaces.  Tokens after the second one are ignored.

    Args:
        value: Raw cell text.

    Returns:
        The :class:`CoordinatePair` found in the cell.

    Raises:
        CoordinateParseError: If the cell is shorter than two characters,
            is not wrapped in square brackets, or holds fewer than two
            values.
    """
    if len(value) < 2:
        raise CoordinateParseError(value, "cell is shorter than two characters")
    if not (value.startswith("[") and value.endswith("]")):
        raise CoordinateParseError(value, "expected a value wrapped in '[' and ']'")

    return _pair_from_fragment(value, value[1:-1])


def parse_multi_pair(value: str) -> list[CoordinatePair]:
    """Parse a ``"[[x1 y1] [x2 y2] ...]"`` cell into its pairs, in order.

    The leading ``[[`` and the first ``]]`` are each removed once, then the
    remainder is split on ``"] ["``.

    Raises:
        CoordinateParseError: If the outer brackets are missing or any
            fragment holds fewer than two values.
    """
    if not value.startswith(MULTI_PAIR_PREFIX):
        raise CoordinateParseError(value, f"expected the cell to start with '{MULTI_PAIR_PREFIX}'")
    if not value.endswith(MULTI_PAIR_SUFFIX):
        raise CoordinateParseError(value, f"expected the cell to end with '{MULTI_PAIR_SUFFIX}'")

    stripped = value.replace(MULTI_PAIR_PREFIX, "", 1).replace(MULTI_PAIR_SUFFIX, "", 1)
    return [
        _pair_from_fragment(value, fragment)
        for fragment in stripped.split(PAIR_SEPARATOR)
    ]


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _pair_from_fragment(cell: str, fragment: str) -> CoordinatePair:
    tokens = fragment.split(VALUE_SEPARATOR)
    if len(tokens) < 2:
        raise CoordinateParseError(
            cell, f"expected two space-separated values, got {fragment!r}"
        )
    return CoordinatePair(x_text=tokens[0], y_text=tokens[1])
