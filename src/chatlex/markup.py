"""Inline markup expansion and positional substitution.

Patterns use ``%v`` for a substitution slot and ``%%`` for a literal percent
sign. Colour and style are written as HTML-like tags such as
``<yellow>%v</yellow>`` or ``<bold><red>!</red></bold>``, which expand into
Bedrock section-sign formatting codes:

    <yellow>%v</yellow>  ->  §e%v§r

Closing a tag resets formatting and re-applies the tags that are still
open, so nesting behaves as written. Tags with unknown names, and closing
tags without a matching opening tag, are kept verbatim.

Substituted values are inserted after the pattern's markup has been
expanded, so markup inside a value (a player name such as ``<red>``) is
never interpreted.

Python 3.13+.
"""

from __future__ import annotations

import re

from chatlex.constants import ESCAPED_PERCENT, FORMAT_PREFIX, FORMATTING_CODES, MARKER, RESET
from chatlex.diagnostics import ErrorTemplate, PatternError

__all__ = [
    "colourf",
    "count_markers",
    "decorate",
    "drop_markup",
    "embed",
    "expand_markup",
    "positional_format",
    "strip_markup",
]

# Escapes match first so "%%v" reads as a literal percent followed by "v".
_TOKEN_PATTERN = re.compile(f"{re.escape(ESCAPED_PERCENT)}|{re.escape(MARKER)}")

_TAG_PATTERN = re.compile(r"<(/?)([a-z][a-z-]*)>")

_CODE_PATTERN = re.compile(re.escape(FORMAT_PREFIX) + r"[0-9a-z]")


def count_markers(pattern: str) -> int:
    """Count ``%v`` substitution slots, ignoring escaped ``%%``.

    Example:
        >>> count_markers("%v joined the game")
        1
        >>> count_markers("100%% of %v")
        1
    """
    return sum(1 for match in _TOKEN_PATTERN.finditer(pattern) if match.group(0) == MARKER)


def positional_format(pattern: str, *args: object) -> str:
    """Substitute ``args`` into the ``%v`` slots of ``pattern`` in order.

    Each argument is converted with ``str()``. ``%%`` becomes ``%``.

    Args:
        pattern: Pattern holding exactly ``len(args)`` markers
        *args: Values to substitute

    Returns:
        Substituted text

    Raises:
        PatternError: If the marker count differs from ``len(args)``
    """
    found = count_markers(pattern)
    if found != len(args):
        diagnostic = ErrorTemplate.format_argument_mismatch(pattern, found, len(args))
        raise PatternError(diagnostic, pattern=pattern, expected=len(args), found=found)

    values = iter(args)

    def _substitute(match: re.Match[str]) -> str:
        if match.group(0) == ESCAPED_PERCENT:
            return "%"
        return str(next(values))

    return _TOKEN_PATTERN.sub(_substitute, pattern)


def embed(pattern: str, text: str) -> str:
    """Place ``text`` at the single marker of ``pattern``, uninterpreted.

    Escapes and markup in both strings are left as written, so the result
    can be expanded as one pattern. Markers inside ``text`` survive and are
    filled later.

    Example:
        >>> embed("<yellow>%v</yellow>", "<bold>%v</bold> won")
        '<yellow><bold>%v</bold> won</yellow>'

    Raises:
        PatternError: If ``pattern`` does not hold exactly one marker
    """
    found = count_markers(pattern)
    if found != 1:
        diagnostic = ErrorTemplate.format_argument_mismatch(pattern, found, 1)
        raise PatternError(diagnostic, pattern=pattern, expected=1, found=found)

    def _splice(match: re.Match[str]) -> str:
        return text if match.group(0) == MARKER else match.group(0)

    return _TOKEN_PATTERN.sub(_splice, pattern)


def expand_markup(text: str) -> str:
    """Replace known markup tags in ``text`` with formatting codes.

    Markers are left in place; substitution happens afterwards.
    """
    parts: list[str] = []
    open_tags: list[str] = []
    pos = 0
    for match in _TAG_PATTERN.finditer(text):
        parts.append(text[pos : match.start()])
        pos = match.end()
        closing, name = match.group(1), match.group(2)
        code = FORMATTING_CODES.get(name)
        if code is None:
            parts.append(match.group(0))
        elif not closing:
            open_tags.append(name)
            parts.append(code)
        elif name in open_tags:
            # Close the innermost tag of that name, then restore the rest.
            index = len(open_tags) - 1 - open_tags[::-1].index(name)
            del open_tags[index]
            parts.append(RESET)
            parts.extend(FORMATTING_CODES[tag] for tag in open_tags)
        else:
            parts.append(match.group(0))
    parts.append(text[pos:])
    return "".join(parts)


def drop_markup(text: str) -> str:
    """Remove known markup tags from ``text`` without emitting codes."""

    def _drop(match: re.Match[str]) -> str:
        return "" if match.group(2) in FORMATTING_CODES else match.group(0)

    return _TAG_PATTERN.sub(_drop, text)


def strip_markup(text: str) -> str:
    """Remove both markup tags and section-sign codes from ``text``.

    Useful for writing already-rendered chat lines to logs.
    """
    return _CODE_PATTERN.sub("", drop_markup(text))


def colourf(format: str, *args: object) -> str:  # noqa: A002 - mirrors str.format naming
    """Expand the markup in ``format`` and substitute ``args`` literally.

    Example:
        >>> colourf("<yellow>%v</yellow>", "Steve")
        '§eSteve§r'
    """
    return positional_format(expand_markup(format), *args)


def decorate(pattern: str, value: object, *, colour: bool = True) -> str:
    """Wrap ``value`` in a one-marker decoration pattern.

    Args:
        pattern: Pattern with exactly one ``%v`` marker and optional markup
        value: Text placed at the marker, never interpreted as markup
        colour: Emit formatting codes; when False the markup is dropped

    Returns:
        Decorated text

    Raises:
        PatternError: If ``pattern`` does not hold exactly one marker
    """
    if colour:
        return colourf(pattern, value)
    return positional_format(drop_markup(pattern), value)
