"""Name validation and normalisation for project and package names."""

from __future__ import annotations

import string
from enum import Enum
from typing import NewType

from .errors import InvalidNameError, NameErrorReason

__all__ = ["CasingPolicy", "NormalizedName", "validate_name"]


NormalizedName = NewType("NormalizedName", str)

_LETTERS = frozenset(string.ascii_letters)


class CasingPolicy(str, Enum):
    """Casing rules a name can be validated against."""

    SNAKE_CASE = "snake_case"
    TRAIN_CASE = "Train-Case"

    @property
    def delimiter(self) -> str:
        return "_" if self is CasingPolicy.SNAKE_CASE else "-"


def _check_char(name: str, index: int, delimiter: str) -> None:
    char = name[index]
    if char.isdigit():
        raise InvalidNameError(name, NameErrorReason.NUMBER_NOT_ALLOWED, index)
    if char not in _LETTERS and char != delimiter:
        raise InvalidNameError(name, NameErrorReason.SPECIAL_CHAR_NOT_ALLOWED, index)


def _validate_snake(name: str) -> NormalizedName:
    for index in range(len(name)):
        _check_char(name, index, CasingPolicy.SNAKE_CASE.delimiter)
    return NormalizedName(name.lower())


def _validate_train(name: str) -> NormalizedName:
    capitalize_next = True
    normalized: list[str] = []
    for index, char in enumerate(name):
        _check_char(name, index, CasingPolicy.TRAIN_CASE.delimiter)
        char = char.lower()
        if capitalize_next:
            char = char.upper()
            capitalize_next = False
        if char == "-":
            capitalize_next = True
        normalized.append(char)
    return NormalizedName("".join(normalized))


def validate_name(name: str, policy: CasingPolicy) -> NormalizedName:
    """Validate ``name`` against ``policy`` and return its normalised form.

    Parameters
    ----------
    name:
        Raw user input.
    policy:
        :attr:`CasingPolicy.SNAKE_CASE` accepts ASCII letters and ``_`` and
        lower-cases the result. :attr:`CasingPolicy.TRAIN_CASE` accepts ASCII
        letters and ``-``, lower-cases the input and then upper-cases the first
        character and every character that follows a ``-``.

    Raises
    ------
    InvalidNameError
        On the first offending character. Digits are reported as
        :attr:`NameErrorReason.NUMBER_NOT_ALLOWED`, anything else outside the
        policy's alphabet as :attr:`NameErrorReason.SPECIAL_CHAR_NOT_ALLOWED`.

    Empty names and leading, trailing or repeated delimiters are accepted.
    """

    if policy is CasingPolicy.SNAKE_CASE:
        return _validate_snake(name)
    return _validate_train(name)
