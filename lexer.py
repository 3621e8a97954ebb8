"""
Scanner for the Java-like expression language.

Overview:
- This module implements a small hand-written lexical analyzer that turns a
    single line of text into a stream of `Token` objects defined in
    `tokens.py`, one token per call to `next_token()`.
- It recognizes identifiers, decimal integer literals, the arithmetic
    operators `+ - * / %`, increment/decrement `++ --`, the assignment
    operators `= += -= *= /= %=` and parentheses. Whitespace is skipped.

Examples:
    Input:  "total += n_1 * 2"
    Tokens: [IDENTIFIER('total'), PLUS_ASSIGN, IDENTIFIER('n_1'), STAR,
             NUMBER(2), END]

Implementation notes:
- The scanner is a deterministic finite automaton. `transition()` is the
    whole transition function; `ACCEPTING` maps each accepting state to the
    kind of token it produces.
- Tokens are formed by maximal munch with backtracking: characters are fed
    to the automaton until it errors or the line ends, and the token is the
    text up to the last accepting state seen. Scanning resumes right after it.
- If no accepting state is reached, the rest of the line becomes a single
    `ERROR` token.
- An underscore is only legal inside an identifier and must be followed by a
    letter or a digit (`a_b` is fine, `_a` and `a_` are not).
- `position` is the offset at which the most recently returned token
    started. Once the line is exhausted the scanner hands out `END` and
    `position` is the length of the line.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Dict, Iterator, List
from tokens import END, Token, TokenType


class State(Enum):
    START = auto()
    IDENTIFIER = auto()
    UNDERSCORE = auto()
    NUMBER = auto()
    LPAREN = auto()
    RPAREN = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    ASSIGN = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()
    PLUS_ASSIGN = auto()
    MINUS_ASSIGN = auto()
    STAR_ASSIGN = auto()
    SLASH_ASSIGN = auto()
    PERCENT_ASSIGN = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


ACCEPTING: Dict[State, TokenType] = {
    State.IDENTIFIER: TokenType.IDENTIFIER,
    State.NUMBER: TokenType.NUMBER,
    State.LPAREN: TokenType.LPAREN,
    State.RPAREN: TokenType.RPAREN,
    State.PLUS: TokenType.PLUS,
    State.MINUS: TokenType.MINUS,
    State.STAR: TokenType.STAR,
    State.SLASH: TokenType.SLASH,
    State.PERCENT: TokenType.PERCENT,
    State.ASSIGN: TokenType.ASSIGN,
    State.PLUS_PLUS: TokenType.PLUS_PLUS,
    State.MINUS_MINUS: TokenType.MINUS_MINUS,
    State.PLUS_ASSIGN: TokenType.PLUS_ASSIGN,
    State.MINUS_ASSIGN: TokenType.MINUS_ASSIGN,
    State.STAR_ASSIGN: TokenType.STAR_ASSIGN,
    State.SLASH_ASSIGN: TokenType.SLASH_ASSIGN,
    State.PERCENT_ASSIGN: TokenType.PERCENT_ASSIGN,
}


def transition(state: State, ch: str) -> State:
    """Return the state reached from `state` on input character `ch`."""
    match state:
        case State.START:
            match ch:
                case "(":
                    return State.LPAREN
                case ")":
                    return State.RPAREN
                case "+":
                    return State.PLUS
                case "-":
                    return State.MINUS
                case "*":
                    return State.STAR
                case "/":
                    return State.SLASH
                case "%":
                    return State.PERCENT
                case "=":
                    return State.ASSIGN
            if ch.isspace():
                return State.START
            if ch.isalpha():
                return State.IDENTIFIER
            if ch.isdecimal():
                return State.NUMBER

        case State.IDENTIFIER:
            if ch.isalpha() or ch.isdecimal():
                return State.IDENTIFIER
            if ch == "_":
                return State.UNDERSCORE

        case State.UNDERSCORE:
            # An underscore has to be followed by more of the identifier.
            if ch.isalpha() or ch.isdecimal():
                return State.IDENTIFIER

        case State.NUMBER:
            if ch.isdecimal():
                return State.NUMBER

        case State.PLUS:
            match ch:
                case "+":
                    return State.PLUS_PLUS
                case "=":
                    return State.PLUS_ASSIGN

        case State.MINUS:
            match ch:
                case "-":
                    return State.MINUS_MINUS
                case "=":
                    return State.MINUS_ASSIGN

        case State.STAR:
            if ch == "=":
                return State.STAR_ASSIGN

        case State.SLASH:
            if ch == "=":
                return State.SLASH_ASSIGN

        case State.PERCENT:
            if ch == "=":
                return State.PERCENT_ASSIGN

    # Every other state (and every unlisted edge) leads to the error state.
    return State.ERROR


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.start = 0  # where the next token begins
        self.position = 0  # where the last returned token began

    def has_next(self) -> bool:
        """True while anything other than whitespace is left to scan."""
        return any(not ch.isspace() for ch in self.text[self.start :])

    def next_token(self) -> Token:
        """Scan and return the next token, or `END` once the line is used up."""
        if not self.has_next():
            self.start = len(self.text)
            self.position = len(self.text)
            return END

        state = State.START
        last_accepting = State.START
        end = self.start

        for i in range(self.start, len(self.text)):
            state = transition(state, self.text[i])
            if state == State.ERROR:
                break
            if state == State.START:
                # Leading whitespace: the token has not started yet.
                self.start = i + 1
            elif state in ACCEPTING:
                last_accepting = state
                end = i

        if last_accepting in ACCEPTING:
            token = self._make_token(last_accepting, self.text[self.start : end + 1])
        else:
            token = Token(TokenType.ERROR, self.text[self.start :])
            end = len(self.text) - 1

        self.position = self.start
        self.start = end + 1
        return token

    def _make_token(self, state: State, lexeme: str) -> Token:
        token_type = ACCEPTING[state]
        match token_type:
            case TokenType.IDENTIFIER:
                return Token(token_type, lexeme)
            case TokenType.NUMBER:
                try:
                    return Token(token_type, int(lexeme))
                except ValueError:
                    # Longer than the interpreter is willing to convert.
                    return Token(TokenType.ERROR, lexeme)
            case _:
                return Token(token_type)

    def __iter__(self) -> Iterator[Token]:
        while self.has_next():
            yield self.next_token()

    def tokenize(self) -> List[Token]:
        """Return all tokens of the line, terminated by `END`."""
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens
