"""Token definitions for the expression scanner.

This module defines the `TokenType` enum for every token kind recognized by
the scanner and a small immutable `Token` dataclass that holds a token type
and an optional value (the integer of a number, the name of an identifier,
the remaining text of an error). Tokens carry no position: the scanner keeps
track of where the most recent token started.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()

    # Increment / decrement
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()

    # Assignment operators
    ASSIGN = auto()
    PLUS_ASSIGN = auto()
    MINUS_ASSIGN = auto()
    STAR_ASSIGN = auto()
    SLASH_ASSIGN = auto()
    PERCENT_ASSIGN = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Special
    ERROR = auto()
    END = auto()

    def __str__(self) -> str:
        return self.name


# Fixed spelling of every token kind that has one.
IMAGES = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.PERCENT: "%",
    TokenType.PLUS_PLUS: "++",
    TokenType.MINUS_MINUS: "--",
    TokenType.ASSIGN: "=",
    TokenType.PLUS_ASSIGN: "+=",
    TokenType.MINUS_ASSIGN: "-=",
    TokenType.STAR_ASSIGN: "*=",
    TokenType.SLASH_ASSIGN: "/=",
    TokenType.PERCENT_ASSIGN: "%=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.END: "",
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | int] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        return self.lexeme

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return IMAGES.get(self.type, str(self.type))
        return str(self.value)


# The end-of-input sentinel handed out once the scanner is exhausted.
END = Token(TokenType.END)
