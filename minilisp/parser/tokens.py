# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token vocabulary shared by the scanner, the grammar table and the parser.

MiniLisp reserves four non-ASCII glyphs. They are fixed code points and must
not be approximated with ASCII look-alikes (in particular `-` is *not* the
minus operator; the scanner reports it with a dedicated hint).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

MINUS_SIGN = "\u2212"  # −
MULTIPLICATION_SIGN = "\u00d7"  # ×
GREEK_SMALL_LAMBDA = "\u03bb"  # λ
DELTA_EQUAL_TO = "\u225c"  # ≜
HYPHEN_MINUS = "-"


class TokenKind(str, Enum):
	NUMBER = "NUMBER"
	IDENTIFIER = "IDENTIFIER"
	PLUS = "PLUS"
	MINUS = "MINUS"
	MULT = "MULT"
	EQUALS = "EQUALS"
	CONDITIONAL = "CONDITIONAL"
	LAMBDA = "LAMBDA"
	LET = "LET"
	LPAREN = "LPAREN"
	RPAREN = "RPAREN"
	EOF = "EOF"

	@property
	def glyph(self) -> Optional[str]:
		"""Source character for single-character kinds, None for the rest."""
		return _GLYPHS.get(self)

	@property
	def carries_lexeme(self) -> bool:
		return self in (TokenKind.NUMBER, TokenKind.IDENTIFIER)

	def describe(self) -> str:
		"""Human-facing name used in diagnostics (`')'`, `NUMBER`, `end of input`)."""
		if self is TokenKind.EOF:
			return "end of input"
		glyph = self.glyph
		if glyph is not None:
			return f"'{glyph}'"
		return self.value


_GLYPHS: dict[TokenKind, str] = {
	TokenKind.PLUS: "+",
	TokenKind.MINUS: MINUS_SIGN,
	TokenKind.MULT: MULTIPLICATION_SIGN,
	TokenKind.EQUALS: "=",
	TokenKind.CONDITIONAL: "?",
	TokenKind.LAMBDA: GREEK_SMALL_LAMBDA,
	TokenKind.LET: DELTA_EQUAL_TO,
	TokenKind.LPAREN: "(",
	TokenKind.RPAREN: ")",
}

# Characters the scanner turns into a token on their own.
SINGLE_CHAR_TOKENS: Mapping[str, TokenKind] = {glyph: kind for kind, glyph in _GLYPHS.items()}


@dataclass(frozen=True)
class Token:
	"""
	One scanned token.

	`lexeme` is the exact source text for NUMBER and IDENTIFIER and None for
	every other kind. `line`/`column` are 1-based and point at the first
	character of the token.
	"""

	kind: TokenKind
	lexeme: Optional[str]
	line: int
	column: int

	def __post_init__(self) -> None:
		if self.kind.carries_lexeme and self.lexeme is None:
			raise ValueError(f"{self.kind.value} token requires a lexeme")
		if not self.kind.carries_lexeme and self.lexeme is not None:
			raise ValueError(f"{self.kind.value} token does not take a lexeme")
		if self.line < 1 or self.column < 1:
			raise ValueError(f"token position must be 1-based, got {self.line}:{self.column}")

	def describe(self) -> str:
		if self.lexeme is not None:
			return f"{self.kind.value} '{self.lexeme}'"
		return self.kind.describe()

	def __str__(self) -> str:
		if self.lexeme is not None:
			return f"Token({self.kind.value}, '{self.lexeme}', {self.line}:{self.column})"
		return f"Token({self.kind.value}, {self.line}:{self.column})"


__all__ = [
	"DELTA_EQUAL_TO",
	"GREEK_SMALL_LAMBDA",
	"HYPHEN_MINUS",
	"MINUS_SIGN",
	"MULTIPLICATION_SIGN",
	"SINGLE_CHAR_TOKENS",
	"Token",
	"TokenKind",
]
