"""Apply a style to characters and strings.

For one character the engine runs a single pass:

1. look the glyph up in the registry (unknown glyphs are returned as is);
2. pick the target token, defaulting to the meta-token of the glyph's style;
3. substitute the token through the alphabet's transition row;
4. fold it through the alias table;
5. look up the same character in the resolved style, or keep the original.

Strings are styled character by character with no state carried between
characters.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .config import StylePolicy
from .styles import StyleToken, meta_style
from .substitutions import StyleTables, tables_for


def style_char(char: str, tables: StyleTables, target: StyleToken | None = None) -> str:
    """Return ``char`` rendered in ``target`` (or restyled by policy when ``None``)."""
    descriptor = tables.registry.descriptor_for(char)
    if descriptor is None:
        return char
    requested = meta_style(descriptor.style) if target is None else target
    resolved = tables.resolve_style(descriptor.alphabet, descriptor.style, requested)
    glyph = tables.registry.glyph_for(descriptor.alphabet, resolved, descriptor.name)
    return char if glyph is None else glyph


@dataclass(frozen=True, slots=True)
class StyledText:
    """Lazy view of ``text`` styled with ``tables``.

    Each iteration starts over from the first character of ``text``.
    """

    text: str
    tables: StyleTables
    target: StyleToken | None = None

    def __iter__(self) -> Iterator[str]:
        for char in self.text:
            yield style_char(char, self.tables, self.target)

    def __str__(self) -> str:
        return "".join(self)


def iter_styled(
    text: str, tables: StyleTables, target: StyleToken | None = None
) -> StyledText:
    """Return a restartable iterable over the styled characters of ``text``."""
    return StyledText(text, tables, target)


def apply_style(
    text: str,
    target: StyleToken | None = None,
    policy: StylePolicy | None = None,
    *,
    tables: StyleTables | None = None,
    **options: Any,
) -> str:
    """Style a character or a string.

    The policy can be given as a :class:`StylePolicy`, as keyword fields
    (``math_style_spec="iso"``), or both, keyword fields taking precedence.
    Prebuilt ``tables`` skip resolution entirely and exclude the other two.
    A policy given in place of the target token is taken as the policy.
    """
    if isinstance(target, StylePolicy):
        if policy is not None:
            raise TypeError("Got two policies; pass the target token first.")
        target, policy = None, target
    if tables is None:
        tables = tables_for(policy, **options)
    elif policy is not None or options:
        raise TypeError("Pass either prebuilt tables or a policy, not both.")
    return str(iter_styled(text, tables, target))


__all__ = ["StyledText", "apply_style", "iter_styled", "style_char"]
