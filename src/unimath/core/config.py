"""Style policies and their resolution into per-alphabet preferences.

StylePolicy

`math_style_spec` (`MathStyleSpec | str`)
: Top-level convention (`tex`, `iso`, `french`, `upright`, `literal`). It
  seeds every other field. Unknown tags behave like `literal`.

`normal_style_spec` (`NormalStyleSpec | PerAlphabetStyle | str | None`)
: Shape of normal weight letters. Either a named convention or an explicit
  per-alphabet record. `None` inherits from `math_style_spec`.

`bold_style_spec` (`BoldStyleSpec | PerAlphabetStyle | str | None`)
: Shape of bold letters, same rules as `normal_style_spec`.

`sans_style` (`ShapePreference | None`)
: Shape of sans-serif letters, shared by all letter alphabets.

`partial` (`ShapePreference | None`)
: Shape of the partial differential symbol in every weight.

`nabla` (`ShapePreference | None`)
: Shape of the nabla symbol in every weight.

ResolvedConfig

: The same fields as `StylePolicy` minus `math_style_spec`, all populated.
  It is frozen and hashable so that substitution tables can be cached per
  resolved configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import PolicyError
from .styles import (
    Alphabet,
    BoldStyleSpec,
    MathStyleSpec,
    NormalStyleSpec,
    ShapePreference,
)


logger = logging.getLogger(__name__)

_UP = ShapePreference.UPRIGHT
_IT = ShapePreference.ITALIC
_LIT = ShapePreference.LITERAL

_OVERRIDABLE_FIELDS = (
    "normal_style_spec",
    "bold_style_spec",
    "sans_style",
    "partial",
    "nabla",
)


def _coerce_tag(value: Any, enum_cls: type[Enum]) -> Any:
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return value
    return value


class PerAlphabetStyle(BaseModel):
    """Explicit shape preference for each letter alphabet."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    Greek: ShapePreference
    greek: ShapePreference
    Latin: ShapePreference
    latin: ShapePreference

    def for_alphabet(self, alphabet: Alphabet) -> ShapePreference:
        """Return the preference recorded for a letter alphabet."""
        return getattr(self, Alphabet(alphabet).value)

    @classmethod
    def parse(cls, text: str) -> PerAlphabetStyle:
        """Parse ``Greek=upright,greek=italic,Latin=italic,latin=italic``."""
        fields: dict[str, str] = {}
        for chunk in text.split(","):
            chunk = chunk.strip()
            if not chunk:
                continue
            key, sep, value = chunk.partition("=")
            if not sep:
                raise PolicyError(f"Expected 'alphabet=shape', got '{chunk}'.")
            key = key.strip()
            if key in fields:
                raise PolicyError(f"Alphabet '{key}' is given more than once.")
            fields[key] = value.strip()
        try:
            return cls.model_validate(fields)
        except ValidationError as exc:
            raise PolicyError(f"Invalid per-alphabet style '{text}'.") from exc


NormalSpec = NormalStyleSpec | PerAlphabetStyle | str
BoldSpec = BoldStyleSpec | PerAlphabetStyle | str


class StylePolicy(BaseModel):
    """User-facing styling configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    math_style_spec: MathStyleSpec | str = MathStyleSpec.TEX
    normal_style_spec: NormalSpec | None = None
    bold_style_spec: BoldSpec | None = None
    sans_style: ShapePreference | None = None
    partial: ShapePreference | None = None
    nabla: ShapePreference | None = None

    @field_validator("math_style_spec", mode="before")
    @classmethod
    def _coerce_math_style(cls, value: Any) -> Any:
        return _coerce_tag(value, MathStyleSpec)

    @field_validator("normal_style_spec", mode="before")
    @classmethod
    def _coerce_normal_style(cls, value: Any) -> Any:
        return _coerce_tag(value, NormalStyleSpec)

    @field_validator("bold_style_spec", mode="before")
    @classmethod
    def _coerce_bold_style(cls, value: Any) -> Any:
        return _coerce_tag(value, BoldStyleSpec)

    def overrides(self) -> dict[str, Any]:
        """Return the override fields that are set on this policy."""
        return {
            name: getattr(self, name)
            for name in _OVERRIDABLE_FIELDS
            if getattr(self, name) is not None
        }


class ResolvedConfig(BaseModel):
    """Fully populated configuration feeding the table builders."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    normal_style_spec: NormalSpec
    bold_style_spec: BoldSpec
    sans_style: ShapePreference
    partial: ShapePreference
    nabla: ShapePreference

    @field_validator("normal_style_spec", mode="before")
    @classmethod
    def _coerce_normal_style(cls, value: Any) -> Any:
        return _coerce_tag(value, NormalStyleSpec)

    @field_validator("bold_style_spec", mode="before")
    @classmethod
    def _coerce_bold_style(cls, value: Any) -> Any:
        return _coerce_tag(value, BoldStyleSpec)


_BASELINES: dict[MathStyleSpec, ResolvedConfig] = {
    MathStyleSpec.TEX: ResolvedConfig(
        nabla=_UP,
        partial=_IT,
        normal_style_spec=NormalStyleSpec.TEX,
        bold_style_spec=BoldStyleSpec.TEX,
        sans_style=_UP,
    ),
    MathStyleSpec.ISO: ResolvedConfig(
        nabla=_UP,
        partial=_IT,
        normal_style_spec=NormalStyleSpec.ISO,
        bold_style_spec=BoldStyleSpec.ISO,
        sans_style=_IT,
    ),
    MathStyleSpec.FRENCH: ResolvedConfig(
        nabla=_UP,
        partial=_UP,
        normal_style_spec=NormalStyleSpec.FRENCH,
        bold_style_spec=BoldStyleSpec.UPRIGHT,
        sans_style=_UP,
    ),
    MathStyleSpec.UPRIGHT: ResolvedConfig(
        nabla=_UP,
        partial=_UP,
        normal_style_spec=NormalStyleSpec.UPRIGHT,
        bold_style_spec=BoldStyleSpec.UPRIGHT,
        sans_style=_UP,
    ),
}

_LITERAL_BASELINE = ResolvedConfig(
    nabla=_LIT,
    partial=_LIT,
    normal_style_spec=NormalStyleSpec.LITERAL,
    bold_style_spec=BoldStyleSpec.LITERAL,
    sans_style=_LIT,
)


def resolve(policy: StylePolicy | None = None) -> ResolvedConfig:
    """Expand ``policy`` into a fully populated configuration.

    The baseline row is selected by ``math_style_spec``; each override set on
    the policy then replaces its field verbatim, independently of the others.
    """
    policy = policy if policy is not None else StylePolicy()
    baseline = _BASELINES.get(policy.math_style_spec)
    if baseline is None:
        if policy.math_style_spec != MathStyleSpec.LITERAL:
            logger.debug(
                "Unknown math style spec %r, using the literal baseline.",
                policy.math_style_spec,
            )
        baseline = _LITERAL_BASELINE
    fields = {name: getattr(baseline, name) for name in _OVERRIDABLE_FIELDS}
    fields.update(policy.overrides())
    return ResolvedConfig(**fields)


def _styles(greek_upper, greek_lower, latin_upper, latin_lower) -> PerAlphabetStyle:
    return PerAlphabetStyle(
        Greek=greek_upper, greek=greek_lower, Latin=latin_upper, latin=latin_lower
    )


_LITERAL_STYLES = _styles(_LIT, _LIT, _LIT, _LIT)

_NORMAL_EXPANSIONS: dict[NormalStyleSpec, PerAlphabetStyle] = {
    NormalStyleSpec.ISO: _styles(_IT, _IT, _IT, _IT),
    NormalStyleSpec.TEX: _styles(_UP, _IT, _IT, _IT),
    NormalStyleSpec.FRENCH: _styles(_UP, _UP, _UP, _IT),
    NormalStyleSpec.UPRIGHT: _styles(_UP, _UP, _UP, _UP),
    NormalStyleSpec.LITERAL: _LITERAL_STYLES,
}

# French has no bold convention of its own and falls through to literal.
_BOLD_EXPANSIONS: dict[BoldStyleSpec, PerAlphabetStyle] = {
    BoldStyleSpec.ISO: _styles(_IT, _IT, _IT, _IT),
    BoldStyleSpec.TEX: _styles(_UP, _IT, _UP, _UP),
    BoldStyleSpec.UPRIGHT: _styles(_UP, _UP, _UP, _UP),
    BoldStyleSpec.LITERAL: _LITERAL_STYLES,
}


def _expand(
    spec: Any, expansions: Mapping[Any, PerAlphabetStyle], kind: str
) -> PerAlphabetStyle:
    if isinstance(spec, PerAlphabetStyle):
        return spec
    expanded = expansions.get(spec)
    if expanded is None:
        logger.debug("No %s style table for %r, using literal shapes.", kind, spec)
        return _LITERAL_STYLES
    return expanded


def expand_normal(spec: NormalSpec) -> PerAlphabetStyle:
    """Return the per-alphabet normal shapes for a named spec or explicit record."""
    return _expand(spec, _NORMAL_EXPANSIONS, "normal")


def expand_bold(spec: BoldSpec) -> PerAlphabetStyle:
    """Return the per-alphabet bold shapes for a named spec or explicit record."""
    return _expand(spec, _BOLD_EXPANSIONS, "bold")


def coerce_policy(policy: StylePolicy | None = None, **options: Any) -> StylePolicy:
    """Combine an optional policy with inline keyword fields.

    Keyword fields win over the fields of ``policy``. Passing something that
    is not a ``StylePolicy`` is a caller error.
    """
    if policy is None:
        return StylePolicy(**options)
    if not isinstance(policy, StylePolicy):
        raise TypeError(f"Expected a StylePolicy, got {type(policy).__name__}.")
    if not options:
        return policy
    merged = {
        name: getattr(policy, name)
        for name in ("math_style_spec", *_OVERRIDABLE_FIELDS)
        if getattr(policy, name) is not None
    }
    merged.update(options)
    return StylePolicy(**merged)


__all__ = [
    "BoldSpec",
    "NormalSpec",
    "PerAlphabetStyle",
    "ResolvedConfig",
    "StylePolicy",
    "coerce_policy",
    "expand_bold",
    "expand_normal",
    "resolve",
]
