"""Read-only index of styled mathematical characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from unimath.core.styles import Alphabet, BaseStyle


@dataclass(frozen=True, slots=True)
class CharacterDescriptor:
    """One styled rendering of an abstract character."""

    name: str
    alphabet: Alphabet
    style: BaseStyle
    glyph: str

    @property
    def codepoint(self) -> str:
        """Code point of the glyph as ``U+XXXX``."""
        return f"U+{ord(self.glyph):04X}"

    def to_dict(self) -> dict[str, str]:
        """Return the descriptor fields as plain strings."""
        return {
            "name": self.name,
            "alphabet": self.alphabet.value,
            "style": self.style.value,
            "glyph": self.glyph,
            "codepoint": self.codepoint,
        }


class CharacterRegistry:
    """Index descriptors by glyph and by ``(alphabet, style, name)``.

    The registry is populated once and never mutated. Both indexes are exposed
    as read-only mappings; lookups return ``None`` for unknown entries.
    """

    def __init__(self, descriptors: Iterable[CharacterDescriptor]) -> None:
        by_glyph: dict[str, CharacterDescriptor] = {}
        by_key: dict[tuple[Alphabet, BaseStyle, str], CharacterDescriptor] = {}
        for descriptor in descriptors:
            if len(descriptor.glyph) != 1:
                raise ValueError(f"Glyph {descriptor.glyph!r} is not a single character.")
            key = (descriptor.alphabet, descriptor.style, descriptor.name)
            if key in by_key:
                raise ValueError(
                    f"Duplicate entry for {descriptor.alphabet}/{descriptor.style}/"
                    f"{descriptor.name}: {by_key[key].codepoint} and {descriptor.codepoint}."
                )
            if descriptor.glyph in by_glyph:
                raise ValueError(f"Glyph {descriptor.codepoint} is registered twice.")
            by_key[key] = descriptor
            by_glyph[descriptor.glyph] = descriptor
        self._by_glyph = MappingProxyType(by_glyph)
        self._by_key = MappingProxyType(by_key)

    def descriptor_for(self, glyph: str) -> CharacterDescriptor | None:
        """Return the descriptor of ``glyph`` or ``None`` when unregistered."""
        return self._by_glyph.get(glyph)

    def lookup(self, alphabet: Any, style: Any, name: str) -> CharacterDescriptor | None:
        """Return the descriptor registered for ``(alphabet, style, name)``."""
        return self._by_key.get((alphabet, style, name))

    def glyph_for(self, alphabet: Any, style: Any, name: str) -> str | None:
        """Return the glyph registered for ``(alphabet, style, name)``."""
        descriptor = self.lookup(alphabet, style, name)
        return descriptor.glyph if descriptor is not None else None

    def styles_for(self, alphabet: Alphabet, name: str) -> tuple[BaseStyle, ...]:
        """Return every style in which the named character exists."""
        return tuple(style for style in BaseStyle if (alphabet, style, name) in self._by_key)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._by_glyph

    def __iter__(self) -> Iterator[CharacterDescriptor]:
        return iter(self._by_glyph.values())

    def __len__(self) -> int:
        return len(self._by_glyph)


__all__ = ["CharacterDescriptor", "CharacterRegistry"]
