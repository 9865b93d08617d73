"""Character registry mapping glyphs to their alphabet, style and name.

The styling engine only needs two lookups from this package: glyph to
:class:`CharacterDescriptor` and ``(alphabet, style, name)`` to glyph. The
default registry is derived once from :mod:`unicodedata` and shared read-only
by every caller.
"""

from __future__ import annotations

from functools import lru_cache
import logging

from .characters import CharacterDescriptor, CharacterRegistry
from .ucd import iter_descriptors


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_registry() -> CharacterRegistry:
    """Return the process-wide registry built from the Unicode database."""
    registry = CharacterRegistry(iter_descriptors())
    logger.debug("Loaded %d mathematical characters.", len(registry))
    return registry


__all__ = ["CharacterDescriptor", "CharacterRegistry", "get_registry"]
