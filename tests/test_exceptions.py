from __future__ import annotations

import pytest

from unimath import PerAlphabetStyle, PolicyError, UnimathError
from unimath.core.exceptions import exception_hint, exception_messages


def test_policy_error_is_a_value_error() -> None:
    assert issubclass(PolicyError, UnimathError)
    assert issubclass(PolicyError, ValueError)


def test_messages_follow_the_cause_chain() -> None:
    with pytest.raises(PolicyError) as excinfo:
        PerAlphabetStyle.parse("Greek=bold,greek=italic,Latin=italic,latin=italic")

    messages = exception_messages(excinfo.value)

    assert messages[0] == "Invalid per-alphabet style 'Greek=bold,greek=italic,Latin=italic,latin=italic'."
    assert len(messages) == 2
    assert exception_hint(excinfo.value) == messages[-1]


def test_hint_of_an_empty_exception() -> None:
    assert exception_hint(RuntimeError()) is None
    assert exception_messages(ValueError("first line\nsecond line")) == ["first line"]
