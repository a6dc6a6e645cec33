from __future__ import annotations

from typing import Any


class CardParseError(ValueError):
    code = "PARSE_ERROR"

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardParseError):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))


class BadInteger(CardParseError):
    code = "BAD_INTEGER"

    def __init__(self, value: int) -> None:
        super().__init__(value, f"failed to parse from unexpected integer {value}")


class BadCharacter(CardParseError):
    code = "BAD_CHARACTER"

    def __init__(self, value: str) -> None:
        super().__init__(value, f"failed to parse from unexpected character {value!r}")


class BadString(CardParseError):
    code = "BAD_STRING"

    def __init__(self, value: str) -> None:
        super().__init__(value, f'failed to parse from unexpected string "{value}"')


class DerivationError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.code = "DERIVATION_FAILED"
        self.message = message
