"""Exception hierarchy for policy parsing and the command line."""

from __future__ import annotations

from collections.abc import Iterator


class UnimathError(RuntimeError):
    """Base exception for unimath failures."""


class PolicyError(UnimathError, ValueError):
    """Raised when a style policy or per-alphabet override cannot be parsed."""


def iter_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` followed by its causes, stopping at the first cycle."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def exception_messages(exc: BaseException) -> list[str]:
    """Return the first non-empty line of every message in the chain."""
    messages = []
    for link in iter_exception_chain(exc):
        lines = [line.strip() for line in str(link).splitlines() if line.strip()]
        if lines:
            messages.append(lines[0])
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the innermost message of the chain, usually the most specific."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "PolicyError",
    "UnimathError",
    "exception_hint",
    "exception_messages",
    "iter_exception_chain",
]
