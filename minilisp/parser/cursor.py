# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Sequence

from .errors import ParseError
from .tokens import Token, TokenKind


class TokenCursor:
	"""
	Read position over a scanned token list.

	Shared by the engine and the application sub-parser so both consume from
	the same stream. The trailing EOF token is never advanced past.
	"""

	def __init__(self, tokens: Sequence[Token]) -> None:
		if not tokens or tokens[-1].kind is not TokenKind.EOF:
			raise ValueError("token stream must end with an EOF token")
		self._tokens = tuple(tokens)
		self._index = 0

	@property
	def current(self) -> Token:
		return self._tokens[self._index]

	@property
	def index(self) -> int:
		return self._index

	def advance(self) -> Token:
		token = self._tokens[self._index]
		if token.kind is not TokenKind.EOF:
			self._index += 1
		return token

	def expect(self, kind: TokenKind) -> Token:
		token = self.current
		if token.kind is not kind:
			raise ParseError.mismatch(kind, token)
		return self.advance()

	def at_end(self) -> bool:
		return self.current.kind is TokenKind.EOF


__all__ = ["TokenCursor"]
