"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

ERROR_MESSAGE = "Los parametros no son correctos primo\n"
ERROR_LIMIT = "Te pasate de número bro\n"
ERROR_DOBLE = "El número está duplicado chaval\n"
ERROR_VACIO = "El string esta vacio man\n"
ERROR_1ARGC = "Solo hay un número menda\n"

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Rejected input, with the message to report and the exit status to use."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


def is_valid_number(text: str) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    digits = text[1:] if text[:1] in ("-", "+") else text
    return bool(digits) and all("0" <= ch <= "9" for ch in digits)


def atol(text: str) -> int:
    """Read a leading integer: skip whitespace, take a sign, stop at the first non-digit."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def join_arguments(args: Sequence[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def tokenize(args: Sequence[str]) -> list[str]:
    """Split the joined arguments on spaces, dropping empty pieces."""
    return [token for token in join_arguments(args).split(" ") if token]


def validate_token(token: str) -> None:
    """Raise InputError unless the token is a number in the 32-bit signed range."""
    if not is_valid_number(token):
        raise InputError(ERROR_MESSAGE)
    if not INT_MIN <= atol(token) <= INT_MAX:
        raise InputError(ERROR_LIMIT)


def check_duplicates(tokens: Sequence[str]) -> None:
    """Raise InputError if two tokens denote the same number."""
    seen: set[int] = set()
    for token in tokens:
        value = atol(token)
        if value in seen:
            raise InputError(ERROR_DOBLE)
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return the numbers they hold, in order."""
    tokens = tokenize(args)
    if not tokens:
        raise InputError(ERROR_VACIO, exit_code=1)
    if len(tokens) == 1:
        raise InputError(ERROR_1ARGC, exit_code=0)
    for token in tokens:
        validate_token(token)
    check_duplicates(tokens)
    return [atol(token) for token in tokens]