# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
MiniLisp scanner: source text -> list of tokens ending in exactly one EOF.

Single left-to-right pass with an explicit cursor (offset, line, column).
Whitespace never produces tokens; the first bad character raises `LexError`.
Columns count code points, so `λ` advances the column by one.
"""

from __future__ import annotations

import string

from .errors import LexError
from .tokens import HYPHEN_MINUS, MINUS_SIGN, SINGLE_CHAR_TOKENS, Token, TokenKind

_BLANKS = frozenset(" \t\r")
# ASCII only: str.isdigit()/isalpha() would accept other scripts.
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class Scanner:
	def __init__(self, source: str) -> None:
		self._source = source
		self._pos = 0
		self._line = 1
		self._column = 1

	def tokens(self) -> list[Token]:
		out: list[Token] = []
		while True:
			self._skip_whitespace()
			if self._at_end():
				break
			out.append(self._next_token())
		out.append(Token(TokenKind.EOF, None, self._line, self._column))
		return out

	def _at_end(self) -> bool:
		return self._pos >= len(self._source)

	def _peek(self) -> str:
		if self._at_end():
			return ""
		return self._source[self._pos]

	def _advance(self) -> str:
		ch = self._source[self._pos]
		self._pos += 1
		if ch == "\n":
			self._line += 1
			self._column = 1
		else:
			self._column += 1
		return ch

	def _skip_whitespace(self) -> None:
		while not self._at_end():
			ch = self._peek()
			if ch in _BLANKS or ch == "\n":
				self._advance()
			else:
				return

	def _next_token(self) -> Token:
		line, column = self._line, self._column
		ch = self._peek()

		kind = SINGLE_CHAR_TOKENS.get(ch)
		if kind is not None:
			self._advance()
			return Token(kind, None, line, column)
		if ch in _DIGITS:
			return self._scan_number(line, column)
		if ch in _LETTERS:
			return self._scan_identifier(line, column)
		if ch == HYPHEN_MINUS:
			raise LexError(
				f"invalid character '-' (ASCII hyphen-minus U+002D) at line {line}, column {column}; "
				f"did you mean '{MINUS_SIGN}' (minus sign U+2212)?",
				line=line,
				column=column,
				char=ch,
				code="hyphen-minus",
				hint=f"use '{MINUS_SIGN}' (U+2212) for subtraction",
			)
		raise LexError(
			f"unexpected character '{ch}' (U+{ord(ch):04X}) at line {line}, column {column}",
			line=line,
			column=column,
			char=ch,
		)

	def _scan_number(self, line: int, column: int) -> Token:
		start = self._pos
		while self._peek() in _DIGITS:
			self._advance()
		bad = self._peek()
		if bad in _LETTERS:
			raise LexError(
				f"invalid character '{bad}' in number at line {self._line}, column {self._column}",
				line=self._line,
				column=self._column,
				char=bad,
				code="malformed-number",
			)
		return Token(TokenKind.NUMBER, self._source[start : self._pos], line, column)

	def _scan_identifier(self, line: int, column: int) -> Token:
		start = self._pos
		self._advance()
		while self._peek() in _LETTERS or self._peek() in _DIGITS:
			self._advance()
		return Token(TokenKind.IDENTIFIER, self._source[start : self._pos], line, column)


def scan(source: str) -> list[Token]:
	"""Tokenize `source`; raises `LexError` on the first unrecognised character."""
	return Scanner(source).tokens()


__all__ = ["Scanner", "scan"]
